import subprocess
import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from convcommit.vcs.git_client import GitClient, GitError


class DummyProc(SimpleNamespace):
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class TestGitClient(unittest.TestCase):
    def test_get_commit_message_runs_git_log(self) -> None:
        calls = []

        def fake_run(self, args):
            calls.append(args)
            return DummyProc(returncode=0, stdout="feat: add x\n\nBody.\n\n", stderr="")

        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = fake_run
            client = GitClient(Path("/repo"))
            message = client.get_commit_message("abc123")
        self.assertEqual(message, "feat: add x\n\nBody.\n\n")
        self.assertEqual(calls, [["log", "-1", "--format=%B", "abc123", "--"]])

    def test_run_raises_on_failure(self) -> None:
        proc = subprocess.CompletedProcess(
            args=["git"], returncode=128, stdout="", stderr="fatal: bad revision 'nope'\n"
        )
        with patch("convcommit.vcs.git_client.subprocess.run", return_value=proc):
            client = GitClient(Path("/repo"))
            with self.assertRaises(GitError) as ctx:
                client.get_commit_message("nope")
        self.assertIn("bad revision", str(ctx.exception))

    def test_run_uses_repo_root_as_cwd(self) -> None:
        proc = subprocess.CompletedProcess(args=["git"], returncode=0, stdout="out", stderr="")
        with patch("convcommit.vcs.git_client.subprocess.run", return_value=proc) as mock_run:
            result = GitClient(Path("/repo"))._run(["status"])
        self.assertEqual(result.stdout, "out")
        self.assertEqual(mock_run.call_args[0][0], ["git", "status"])
        self.assertEqual(mock_run.call_args[1]["cwd"], Path("/repo"))

    def test_rev_starting_with_dash_is_rejected(self) -> None:
        with patch("convcommit.vcs.git_client.subprocess.run") as mock_run:
            client = GitClient(Path("/repo"))
            for rev in ["--output=/tmp/out", "-p", "--all"]:
                with self.subTest(rev=rev):
                    with self.assertRaises(GitError) as ctx:
                        client.get_commit_message(rev)
                    self.assertIn("must not start with", str(ctx.exception))
        mock_run.assert_not_called()

    def test_run_raises_when_git_missing(self) -> None:
        with patch("convcommit.vcs.git_client.subprocess.run", side_effect=FileNotFoundError("git")):
            with self.assertRaises(GitError):
                GitClient(Path("/repo")).get_commit_message()

    def test_find_repo_root(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".git").mkdir()
            nested = root / "a" / "b"
            nested.mkdir(parents=True)
            self.assertEqual(GitClient.find_repo_root(nested), root)
            self.assertTrue(GitClient.is_repo(root))
            self.assertFalse(GitClient.is_repo(nested))

    def test_find_repo_root_none(self) -> None:
        with patch.object(GitClient, "is_repo", return_value=False):
            self.assertIsNone(GitClient.find_repo_root(Path("/tmp")))


if __name__ == "__main__":
    unittest.main()
