import os
import signal
from unittest import mock

import pytest

from taskbox.process import daemonize, spawn_and_wait


def test_spawn_and_wait_returns_exit_code():
    assert spawn_and_wait(lambda: 10) == 10


def test_spawn_and_wait_zero():
    assert spawn_and_wait(lambda: 0) == 0


def test_spawn_and_wait_none_is_success():
    assert spawn_and_wait(lambda: None) == 0


def test_spawn_and_wait_exception_exits_one():
    def boom():
        raise RuntimeError("boom")

    assert spawn_and_wait(boom) == 1


def test_spawn_and_wait_runs_in_other_process(tmp_path):
    marker = tmp_path / "pid"
    parent = os.getpid()

    def child():
        marker.write_text(str(os.getpid()))
        return 3

    assert spawn_and_wait(child) == 3
    assert int(marker.read_text()) != parent
    assert int(marker.read_text()) > 0


def test_spawn_and_wait_signal():
    def child():
        os.kill(os.getpid(), signal.SIGTERM)

    assert spawn_and_wait(child) == -signal.SIGTERM


def test_daemonize_parent_exits():
    with mock.patch("os.fork", return_value=4242), mock.patch(
        "os._exit", side_effect=SystemExit(0)
    ) as fake_exit:
        with pytest.raises(SystemExit):
            daemonize("/")
    fake_exit.assert_called_once_with(0)


def test_daemonize_child_detaches(tmp_path):
    manager = mock.Mock()
    with mock.patch("os.fork", return_value=0), mock.patch(
        "os.chdir", manager.chdir
    ), mock.patch("os.setsid", manager.setsid), mock.patch("os.close", manager.close):
        result = daemonize(str(tmp_path))

    assert result == os.getpid()
    names = [call[0] for call in manager.mock_calls]
    assert names.index("chdir") < names.index("setsid")
    manager.chdir.assert_called_once_with(str(tmp_path))
    assert {call.args[0] for call in manager.close.call_args_list} == {0, 1, 2}


def test_daemonize_fork_failure():
    with mock.patch("os.fork", side_effect=OSError(11, "Resource temporarily unavailable")):
        with pytest.raises(OSError):
            daemonize("/")


def test_daemonize_setsid_failure():
    with mock.patch("os.fork", return_value=0), mock.patch("os.chdir"), mock.patch(
        "os.setsid", side_effect=PermissionError(1, "Operation not permitted")
    ), mock.patch("os.close") as fake_close:
        with pytest.raises(PermissionError):
            daemonize("/")
    assert fake_close.call_count == 0