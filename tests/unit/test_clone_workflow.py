from pathlib import Path

from git import Repo

from pacl.clients.git_client import GitClient
from pacl.errors import ExternalCommandFailure
from pacl.models import CloneRequest, RepositoryIdentifier
from pacl.path_builder import build_clone_request
from tests.base import GitRepoTestCase


class TestCloneWorkflow(GitRepoTestCase):
    def _local_identifier(self) -> RepositoryIdentifier:
        return RepositoryIdentifier(
            host="localhost", owner="test", repo="source_repo", url=str(self.repo_path)
        )

    def test_clone_into_mirrored_path(self) -> None:
        request = build_clone_request(self._local_identifier(), self.base_dir)

        GitClient().clone(request)

        destination = self.base_dir / "localhost" / "test" / "source_repo"
        self.assertEqual(request.destination, destination)
        self.assertTrue((destination / "README.md").is_file())
        self.assertEqual(Repo(destination).head.commit.summary, "Second commit")

    def test_passthrough_flags_reach_git(self) -> None:
        request = build_clone_request(
            self._local_identifier(), self.base_dir, ["--no-local", "--depth", "1"]
        )

        GitClient().clone(request)

        cloned = Repo(request.destination)
        self.assertEqual(len(list(cloned.iter_commits())), 1)

    def test_failing_clone_reports_git_exit_code(self) -> None:
        request = CloneRequest(
            url=str(self.temp_path / "does-not-exist"),
            destination=self.base_dir / "missing",
        )

        with self.assertRaises(ExternalCommandFailure) as context:
            GitClient().clone(request)

        self.assertNotEqual(context.exception.exit_code, 0)
        self.assertFalse(Path(request.destination).exists())
