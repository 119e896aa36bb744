from __future__ import annotations

from lib_report_rich.domain.styled import Role, Span, StyledText, join, styled


def test_plain_concatenates_spans() -> None:
    text = styled("a", Role.STRONG) + " b " + styled("c", Role.KEY)

    assert text.plain == "a b c"
    assert str(text) == "a b c"
    assert len(text) == 5


def test_string_on_the_left_is_prepended() -> None:
    text = "    " + styled("x", Role.INFO)

    assert text.spans[0] == Span("    ", ())
    assert text.plain == "    x"


def test_wrap_puts_outer_roles_first() -> None:
    text = styled("x", Role.STRONG).wrap(Role.SUCCESS)

    assert text.spans == (Span("x", (Role.SUCCESS, Role.STRONG)),)


def test_empty_text_has_no_spans() -> None:
    assert styled("").spans == ()
    assert (StyledText() + "").spans == ()


def test_join_concatenates_mixed_parts() -> None:
    assert join(["a", styled("b", Role.KEY), "c"]).plain == "abc"
