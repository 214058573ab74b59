from click.testing import CliRunner

from antimac.cli import cli


MAC = "02:11:22:33:44:55"


def invoke(*args):
    return CliRunner().invoke(cli, list(args))


def test_version(app, make_runner):
    runner = make_runner()

    result = invoke("-v")

    assert result.exit_code == 0
    assert result.output.strip() == "Version: 0.0.1"
    assert runner.commands == []


def test_version_ignores_other_arguments(app, make_runner):
    runner = make_runner()

    for args in (["--version", "en0"], ["-s", "en0", "-v"], ["--bogus", "-v"], ["-c", "en0", "x", "y", "-v"]):
        result = invoke(*args)

        assert result.exit_code == 0, args
        assert "Version: 0.0.1" in result.output
    assert runner.commands == []


def test_no_arguments_is_usage_error(app, make_runner):
    runner = make_runner()

    result = invoke()

    assert result.exit_code == 1
    assert "Missing device argument." in result.output
    assert runner.commands == []


def test_unknown_option_is_usage_error(app, make_runner):
    make_runner()

    result = invoke("--bogus")

    assert result.exit_code == 1


def test_missing_option_value_is_usage_error(app, make_runner):
    make_runner()

    assert invoke("-s").exit_code == 1
    assert invoke("-c", "en0").exit_code == 1


def test_show(app, make_runner):
    make_runner(lines={"| grep ether": "\tether 3c:22:fb:01:02:03 "})

    result = invoke("--show", "en0")

    assert result.exit_code == 0
    assert "[+] en0 MAC address: 3c:22:fb:01:02:03" in result.output


def test_show_not_found(app, make_runner):
    make_runner()

    result = invoke("-s", "bridge0")

    assert result.exit_code == 1
    assert "Could not get MAC address for bridge0" in result.output


def test_random_on_down_device(app, make_runner):
    runner = make_runner(lines={"ifconfig -d": "en0: flags=8822<BROADCAST> mtu 1500"})

    result = invoke("en0")

    assert result.exit_code == 1
    assert "Device en0 is down." in result.output
    assert runner.mutating() == []


def test_config_on_down_device(app, make_runner):
    runner = make_runner(lines={"ifconfig -d": "en0: flags=8822<BROADCAST> mtu 1500"})

    result = invoke("-c", "en0", MAC)

    assert result.exit_code == 1
    assert "Device en0 is down." in result.output
    assert runner.mutating() == []


def test_config_invalid_mac(app, make_runner):
    runner = make_runner()

    result = invoke("--config", "en0", "aabbccddeeff")

    assert result.exit_code == 1
    assert "Mac address is not valid." in result.output
    assert runner.mutating() == []


def test_arm_wifi_retry_succeeds(app, make_runner):
    runner = make_runner(
        lines={"uname -m": "arm64", "grep -A1 Wi-Fi": "Device: en0", "| grep ether": f"\tether {MAC} "},
        statuses={" ether ": [1, 0]},
    )

    result = invoke("-c", "en0", MAC)

    assert result.exit_code == 0
    assert f"[+] MAC address successfully set for en0: {MAC}" in result.output
    assert len([cmd for cmd in runner.commands if " ether " in cmd]) == 2


def test_random_mac_applied(app, make_runner, monkeypatch):
    monkeypatch.setattr("antimac.controllers.mac.generate_mac", lambda: MAC)
    make_runner(lines={"uname -m": "x86_64", "| grep ether": f"\tether {MAC} "})

    result = invoke("en0")

    assert result.exit_code == 0
    assert f"successfully set for en0: {MAC}" in result.output


def test_apply_failure_diagnostic(app, make_runner):
    make_runner(
        lines={"uname -m": "x86_64", "| grep ether": "\tether 3c:22:fb:01:02:03 "},
        statuses={" ether ": [1]},
    )

    result = invoke("-c", "en0", MAC)

    assert result.exit_code == 1
    assert "[!] Failed to set MAC address for en0" in result.output
    assert "[=] Current MAC remains: 3c:22:fb:01:02:03" in result.output
    assert "[x] MAC operation failed. Possible causes:" in result.output
    assert "Insufficient privileges (try sudo)" in result.output


def test_settings_file(app, make_runner, tmp_path):
    path = tmp_path / "antimac.yaml"
    path.write_text("ifconfig: 'true'\nsettle_delay: 0\n", encoding="utf-8")
    make_runner()

    result = invoke("--settings", str(path), "-s", "en0")

    # loading settings replaces the runner, so the real shell answers here
    assert result.exit_code == 1
    assert "Could not get MAC address for en0" in result.output
    assert app.settings.ifconfig == "true"
    assert app.settings.settle_delay == 0


def test_settings_file_must_be_yaml(app, make_runner, tmp_path):
    make_runner()
    path = tmp_path / "antimac.toml"
    path.write_text("", encoding="utf-8")

    result = invoke("--settings", str(path), "-s", "en0")

    assert result.exit_code == 1


def test_settings_file_not_a_mapping(app, make_runner, tmp_path):
    runner = make_runner()
    path = tmp_path / "antimac.yaml"
    path.write_text("- a\n", encoding="utf-8")

    result = invoke("--settings", str(path), "-s", "en0")

    assert result.exit_code == 1
    assert "[Settings Validation Error]" in result.output
    assert runner.commands == []


def test_bare_device_with_whitespace_is_usage_error(app, make_runner):
    runner = make_runner()

    result = invoke("en0 en1")

    assert result.exit_code == 1
    assert "Invalid device name" in result.output
    assert runner.commands == []


def test_version_with_missing_settings_file(app, make_runner, tmp_path):
    make_runner()

    result = invoke("--settings", str(tmp_path / "missing.yaml"), "-v")

    assert result.exit_code == 0
    assert "Version: 0.0.1" in result.output
