from editkit.candidates import any_of, exclude_blank, exclude_non_command, render_command, render_position


def test_render_command_quotes_arguments():
    assert render_command(["compile", "make -k"]) == "compile 'make -k'"
    assert render_command(["volume", "50"]) == "volume 50"


def test_render_position_format():
    assert render_position(12, "def main():") == "12: def main():"


def test_exclusion_predicates():
    assert exclude_blank("")
    assert exclude_blank("   ")
    assert not exclude_blank("x")
    assert exclude_non_command("((a b) c)")
    assert exclude_non_command("")
    assert not exclude_non_command("(a b)")


def test_any_of_combines_predicates():
    predicate = any_of(exclude_blank, lambda label: label.startswith("#"))

    assert predicate("")
    assert predicate("# comment")
    assert not predicate("make")
