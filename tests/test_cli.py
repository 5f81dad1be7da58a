from deskx.cli import main, usage


def test_usage_client():
    text = usage(1)
    assert text.startswith("Usage: ./deskx client [options]\n")
    assert "--color-distance" in text
    assert "--bind-ip" not in text


def test_usage_server():
    text = usage(2)
    assert text.startswith("Usage: ./deskx server [options]\n")
    assert "--bind-ip" in text
    assert "--fps" not in text


def test_usage_general_holds_both():
    text = usage(0)
    assert text.startswith("Usage: ./deskx [mode] [options]\n")
    assert "--bind-ip" in text
    assert "--color-distance" in text
    assert text.endswith("./deskx client --ip=192.168.0.1 --port=1742 --color-distance=2\n")


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 2
    assert usage(0) in capsys.readouterr().out


def test_main_client_without_options(capsys):
    assert main(["client"]) == 2
    assert usage(1) in capsys.readouterr().out


def test_main_server_without_options(capsys):
    assert main(["server"]) == 2
    assert usage(2) in capsys.readouterr().out


def test_main_unknown_mode_with_options(capsys):
    assert main(["bogus", "--port=1742"]) == 2
    assert usage(0) in capsys.readouterr().out


def test_main_runs_server():
    assert main(["server", "--port=0"]) == 3


def test_main_runs_client():
    assert main(["client", "--port=1742"]) == 4