from encore_init.utils import format_command


def test_format_command() -> None:
    assert format_command(["yarn", "add", "--dev", "less"]) == "yarn add --dev less"
    assert format_command(None) == ""
    assert format_command([]) == ""
