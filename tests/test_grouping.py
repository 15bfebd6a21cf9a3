from __future__ import annotations

from printable_shell_command.grouping import group_flag_values, is_option


def test_is_option() -> None:
    assert is_option("-i")
    assert is_option("--exclude")
    assert is_option(b"--exclude")
    assert not is_option("-")
    assert not is_option("--")
    assert not is_option("--exclude-from=.gitignore")
    assert not is_option("file.txt")


def test_group_flag_values() -> None:
    tokens = [
        "-avz",
        "--exclude",
        ".git",
        "--exclude-from=.gitignore",
        "--delete",
        "--info",
        "progress2",
        "./src/",
        "host:dst/",
    ]
    groups = group_flag_values(tokens)
    assert groups == [
        ["-avz"],
        ["--exclude", ".git"],
        ["--exclude-from=.gitignore"],
        ["--delete"],
        ["--info", "progress2"],
        ["./src/"],
        ["host:dst/"],
    ]
    assert [tok for group in groups for tok in group] == tokens


def test_option_takes_at_most_one_value() -> None:
    assert group_flag_values(["-i", "in.mp4", "out.mp4"]) == [
        ["-i", "in.mp4"],
        ["out.mp4"],
    ]
    assert group_flag_values(["--verbose", "--exclude", ".git"]) == [
        ["--verbose"],
        ["--exclude", ".git"],
    ]
    assert group_flag_values([]) == []


def test_double_dash_ends_options() -> None:
    assert group_flag_values(["-v", "--", "-file"]) == [["-v"], ["--"], ["-file"]]
    assert group_flag_values(["-o", "out", "--", "-x", "y"]) == [
        ["-o", "out"],
        ["--"],
        ["-x"],
        ["y"],
    ]
    assert group_flag_values([b"-v", b"--", b"-f"]) == [[b"-v"], [b"--"], [b"-f"]]
