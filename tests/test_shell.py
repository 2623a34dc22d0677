"""Tests for utils/shell.py: sudo wrapping, dry run, exit-status results."""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

from _support import captured_console

from webstrap.utils import shell


class TestBuildArgv(unittest.TestCase):
    def test_sudo_with_env(self):
        with mock.patch.object(shell, "needs_sudo", return_value=True):
            argv = shell.build_argv(["apt-get", "update"], sudo=True,
                                    env={"DEBIAN_FRONTEND": "noninteractive"})
        self.assertEqual(argv, ["sudo", "env", "DEBIAN_FRONTEND=noninteractive", "apt-get", "update"])

    def test_sudo_without_env(self):
        with mock.patch.object(shell, "needs_sudo", return_value=True):
            self.assertEqual(shell.build_argv(["systemctl", "enable", "nginx"], sudo=True),
                             ["sudo", "systemctl", "enable", "nginx"])

    def test_root_runs_bare(self):
        with mock.patch.object(shell, "needs_sudo", return_value=False):
            self.assertEqual(shell.build_argv(["apt-get", "update"], sudo=True, env={"A": "1"}),
                             ["apt-get", "update"])

    def test_unprivileged_query_runs_bare(self):
        with mock.patch.object(shell, "needs_sudo", return_value=True):
            self.assertEqual(shell.build_argv(["dpkg", "-s", "nginx"]), ["dpkg", "-s", "nginx"])


class TestRun(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(shell, "needs_sudo", return_value=False)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_zero_exit_is_success(self):
        with mock.patch.object(shell.subprocess, "call", return_value=0) as call:
            self.assertTrue(shell.run(["true"]))
        call.assert_called_once()
        self.assertEqual(call.call_args.args[0], ["true"])

    def test_nonzero_exit_is_failure(self):
        with mock.patch.object(shell.subprocess, "call", return_value=100):
            self.assertFalse(shell.run(["false"]))

    def test_missing_tool_is_failure(self):
        with mock.patch.object(shell.subprocess, "call", side_effect=FileNotFoundError("yum")):
            self.assertFalse(shell.run(["yum", "install", "-y", "nginx"]))

    def test_quiet_silences_output(self):
        with mock.patch.object(shell.subprocess, "call", return_value=0) as call:
            shell.run(["dpkg", "-s", "nginx"], quiet=True)
        self.assertIs(call.call_args.kwargs["stdout"], subprocess.DEVNULL)
        self.assertIs(call.call_args.kwargs["stderr"], subprocess.DEVNULL)

    def test_env_passed_to_child(self):
        with mock.patch.object(shell.subprocess, "call", return_value=0) as call:
            shell.run(["apt-get", "update"], env={"DEBIAN_FRONTEND": "noninteractive"})
        self.assertEqual(call.call_args.kwargs["env"]["DEBIAN_FRONTEND"], "noninteractive")

    def test_dry_run_prints_and_skips(self):
        with captured_console() as (out, _), \
                mock.patch.object(shell.subprocess, "call") as call:
            self.assertTrue(shell.run(["apt-get", "install", "-y", "nginx"], dry_run=True))
        call.assert_not_called()
        self.assertIn("I: (dry run) apt-get install -y nginx", out.getvalue())


class TestOutput(unittest.TestCase):
    def test_returns_stdout(self):
        with mock.patch.object(shell.subprocess, "check_output", return_value="install ok installed") as co:
            self.assertEqual(shell.output(["dpkg-query", "-W", "nginx"]), "install ok installed")
        self.assertIs(co.call_args.kwargs["stderr"], subprocess.DEVNULL)

    def test_nonzero_exit_is_none(self):
        with mock.patch.object(shell.subprocess, "check_output",
                               side_effect=subprocess.CalledProcessError(1, ["dpkg-query"])):
            self.assertIsNone(shell.output(["dpkg-query", "-W", "nginx"]))

    def test_missing_tool_is_none(self):
        with mock.patch.object(shell.subprocess, "check_output", side_effect=FileNotFoundError("dpkg-query")):
            self.assertIsNone(shell.output(["dpkg-query", "-W", "nginx"]))


if __name__ == "__main__":
    unittest.main()
