from cli import main, resolve_config


def test_cli_prints_users_and_friends(tmp_path, capsys):
    data = tmp_path / "net.txt"
    data.write_text("addfriends bob alice\naddfriends bob carol\nadduser dave\n")

    assert main([str(data), "--workers", "1", "--log-level", "warning"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["alice: bob", "bob: alice, carol", "carol: bob", "dave: "]


def test_cli_suggestions(tmp_path, capsys):
    data = tmp_path / "net.txt"
    data.write_text("addfriends bob alice\naddfriends bob carol\n")

    assert main([str(data), "--suggest", "alice"]) == 0

    assert capsys.readouterr().out.splitlines() == ["carol"]


def test_cli_uses_explicit_config(tmp_path):
    cfg_path = tmp_path / "cfg.yml"
    cfg_path.write_text("ingestion:\n  max_workers: 2\n")

    assert resolve_config(cfg_path).ingestion.max_workers == 2


def test_cli_default_config_is_shipped():
    cfg = resolve_config(None)

    assert cfg.ingestion.max_workers == 4
    assert cfg.logging.level == "INFO"
