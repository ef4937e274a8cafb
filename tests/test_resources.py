"""
Tests for handle release helpers
"""
import pytest

from deepbelief.utils.resources import Disposable, ResourceScope, release_all


class TestReleaseAll:
    """Test releasing groups of handles"""

    def test_releases_in_order(self, make_handle, release_log):
        first = [make_handle('a'), make_handle('b')]
        second = [make_handle('c')]

        release_all(first, second)

        assert release_log == ['a', 'b', 'c']

    def test_single_sequence_of_groups(self, make_handle, release_log):
        """One argument holding all groups behaves like separate arguments"""
        groups = [[make_handle('a'), make_handle('b')], [make_handle('c')]]

        release_all(groups)

        assert release_log == ['a', 'b', 'c']

    def test_single_group(self, make_handle, release_log):
        release_all((make_handle('a'), make_handle('b')))

        assert release_log == ['a', 'b']

    def test_empty_groups(self, release_log):
        release_all()
        release_all([], [])

        assert release_log == []

    def test_failure_propagates(self, make_handle, release_log):
        """A failing release stops the loop and reaches the caller"""
        handles = [make_handle('a'), make_handle('b', fail=True), make_handle('c')]

        with pytest.raises(RuntimeError, match="release failed: b"):
            release_all(handles)

        assert release_log == ['a']

    def test_handles_are_disposable(self, make_handle):
        assert isinstance(make_handle('a'), Disposable)
        assert not isinstance(object(), Disposable)


class TestResourceScope:
    """Test scoped release"""

    def test_releases_on_exit(self, make_handle, release_log):
        with ResourceScope() as scope:
            weights = scope.track(make_handle('weights'))
            hidden, visible = scope.track(make_handle('hidden'), make_handle('visible'))
            assert len(scope) == 3
            assert release_log == []

        assert weights.name == 'weights'
        assert (hidden.name, visible.name) == ('hidden', 'visible')
        assert release_log == ['weights', 'hidden', 'visible']
        assert len(scope) == 0

    def test_releases_when_body_raises(self, make_handle, release_log):
        with pytest.raises(KeyError):
            with ResourceScope() as scope:
                scope.track(make_handle('a'))
                raise KeyError('boom')

        assert release_log == ['a']

    def test_release_is_not_repeated(self, make_handle, release_log):
        scope = ResourceScope()
        scope.track(make_handle('a'))

        scope.release()
        scope.release()

        assert release_log == ['a']
