import pytest
from pytest_check import check

from git_wt.errors import NotAProjectError
from git_wt.operations import LayoutResolver

from helpers import git


class TestResolve:
    """Test mapping project directories to worktrees."""

    def test_main_first_then_sorted(self, temp_project_with_worktrees):
        root = temp_project_with_worktrees
        worktrees = LayoutResolver().resolve(root)

        check.equal([wt.name for wt in worktrees], ["main", "bar", "foo"])
        check.equal([wt.branch for wt in worktrees], ["main", "bar", "foo"])
        check.equal([wt.is_main for wt in worktrees], [True, False, False])
        check.equal(worktrees[1].path, root / "bar")
        check.is_true(all(wt.head for wt in worktrees))

    def test_only_main(self, temp_project):
        worktrees = LayoutResolver().resolve(temp_project)
        assert [(wt.name, wt.is_main) for wt in worktrees] == [("main", True)]

    def test_skips_unrelated_entries(self, temp_project_with_worktrees, tmp_path):
        """Plain directories, files and worktrees placed elsewhere are ignored"""
        root = temp_project_with_worktrees
        (root / "notes").mkdir()
        (root / "todo.txt").write_text("stuff")
        git("worktree", "add", "-b", "far", str(tmp_path / "far"), cwd=root / "main")

        names = [wt.name for wt in LayoutResolver().resolve(root)]

        assert names == ["main", "bar", "foo"]

    def test_detached_worktree(self, temp_project):
        git("worktree", "add", "--detach", str(temp_project / "det"), cwd=temp_project / "main")

        worktrees = LayoutResolver().resolve(temp_project)

        assert worktrees[1].name == "det"
        assert worktrees[1].branch is None

    def test_missing_main_fails(self, tmp_path):
        root = tmp_path / "proj"
        (root / "foo").mkdir(parents=True)

        with pytest.raises(NotAProjectError) as excinfo:
            LayoutResolver().resolve(root)
        check.equal(excinfo.value.path, root)
        check.equal(excinfo.value.exit_code, 2)

    def test_multiple_repositories_fail(self, tmp_path):
        for name in ["one", "two"]:
            (tmp_path / name).mkdir()
            git("init", cwd=tmp_path / name)

        with pytest.raises(NotAProjectError, match="multiple repositories"):
            LayoutResolver().find_main(tmp_path)


class TestDiscoverRoot:
    """Test locating the project root."""

    def test_from_project_root(self, temp_project):
        assert LayoutResolver().discover_root(temp_project) == temp_project

    def test_from_main_worktree(self, temp_project):
        root = LayoutResolver().discover_root(temp_project / "main")
        assert root.resolve() == temp_project.resolve()

    def test_from_inside_linked_worktree(self, temp_project_with_worktrees):
        root = temp_project_with_worktrees
        nested = root / "foo" / "a" / "b"
        nested.mkdir(parents=True)

        assert LayoutResolver().discover_root(nested).resolve() == root.resolve()

    def test_project_inside_other_repository(self, tmp_path):
        """The enclosing repository does not hide the project"""
        git("init", cwd=tmp_path)
        main = tmp_path / "proj" / "main"
        main.mkdir(parents=True)
        git("init", cwd=main)
        git("commit", "--allow-empty", "-m", "Initial commit", cwd=main)

        resolver = LayoutResolver()

        check.equal(resolver.discover_root(tmp_path / "proj"), tmp_path / "proj")
        check.equal(
            resolver.discover_root(main).resolve(), (tmp_path / "proj").resolve()
        )

    def test_outside_any_project(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(NotAProjectError):
            LayoutResolver().discover_root(empty)


class TestCurrent:
    """Test finding the worktree containing a directory."""

    def test_inside_worktree(self, temp_project_with_worktrees):
        root = temp_project_with_worktrees
        (root / "foo" / "src").mkdir()

        current = LayoutResolver().current(root, root / "foo" / "src")

        assert current is not None
        assert current.name == "foo"

    def test_at_root(self, temp_project_with_worktrees):
        root = temp_project_with_worktrees
        assert LayoutResolver().current(root, root) is None
