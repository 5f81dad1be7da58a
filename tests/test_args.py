import pytest

from deskx.args import Args, Mode


def test_client_options():
    args = Args(["deskx", "client", "--ip=192.168.0.1", "--port=1742"])
    assert args.mode is Mode.CLIENT
    assert args["ip"] == "192.168.0.1"
    assert args.num("port") == 1742
    assert args.ok()


def test_server_mode():
    args = Args(["deskx", "server", "--port=1742"])
    assert args.mode is Mode.SERVER
    assert args.ok()


def test_unknown_mode_is_not_ok():
    args = Args(["deskx", "viewer", "--port=1742"])
    assert args.mode is Mode.UNKNOWN
    assert not args.ok()


def test_no_mode_word():
    args = Args(["deskx"])
    assert args.mode is Mode.UNKNOWN
    assert not args.ok()


def test_mode_without_options_is_not_ok():
    args = Args(["deskx", "client"])
    assert args.mode is Mode.CLIENT
    assert not args.ok()


@pytest.mark.parametrize("bad", ["--a", "-x=12", "--noequals", "ip=1.2.3.4"])
def test_malformed_options_are_ignored(bad):
    args = Args(["deskx", "client", bad])
    assert not args.ok()


def test_first_occurrence_wins():
    args = Args(["deskx", "client", "--port=1", "--port=2"])
    assert args["port"] == "1"


def test_missing_key():
    args = Args(["deskx", "client", "--ip=1.2.3.4"])
    assert args["port"] == ""
    assert args.num("port") == -1


@pytest.mark.parametrize(
    "value, expected", [("12abc", 12), ("  -5", -5), ("+7", 7), ("abc", 0)]
)
def test_num_reads_leading_integer(value, expected):
    args = Args(["deskx", "client", f"--fps={value}"])
    assert args.num("fps") == expected


def test_value_may_contain_equals():
    args = Args(["deskx", "client", "--opt=a=b"])
    assert args["opt"] == "a=b"


def test_print_sorted(capsys):
    args = Args(["deskx", "server", "--port=9", "--bind-ip=1.2.3.4"])
    args.print()
    assert capsys.readouterr().out == "bind-ip: 1.2.3.4\nport: 9\n"