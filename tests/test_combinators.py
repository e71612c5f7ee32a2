"""Tests for the conditional combinators on both fluent variants."""

from fluent_string import FluentRef, TextBuffer, fluent


def not_empty(s, _c) -> bool:
    return not s.is_empty()


def both_non_empty(s, s1) -> bool:
    return not (s.is_empty() or s1 == "")


def cut_suffix(suffix: str):
    def predicate(s):
        return len(s) - len(suffix) if s.endswith(suffix) else None

    return predicate


class TestPushIf:
    """push_if appends a character only when the predicate agrees."""

    def test_false_leaves_empty(self, make) -> None:
        assert make("").push_if(",", not_empty) == ""

    def test_true_appends(self, make) -> None:
        assert make("hey").push_if(",", not_empty) == "hey,"

    def test_predicate_sees_state_before_push(self, make) -> None:
        calls = []

        def record(s, c) -> bool:
            calls.append((str(s), c))
            return True

        make("ab").push_if("c", record)
        assert calls == [("ab", "c")]

    def test_predicate_receives_receiver(self, make) -> None:
        value = make("x")
        received = []
        value.push_if("y", lambda s, _c: received.append(s) or False)
        assert received[0] is value

    def test_comma_join(self, make) -> None:
        value = make("")
        for token in ["alpha", "beta", "gamma"]:
            value.push_if(",", not_empty).push_str(token)
        assert value == "alpha,beta,gamma"


class TestPushStrIf:
    """push_str_if appends a fragment only when the predicate agrees."""

    def test_empty_self(self, make) -> None:
        assert make("").push_str_if(",more", both_non_empty) == ""

    def test_empty_fragment(self, make) -> None:
        assert make("hey").push_str_if("", both_non_empty) == "hey"

    def test_true(self, make) -> None:
        assert make("hey").push_str_if(",more", both_non_empty) == "hey,more"

    def test_join_with_separator(self, make) -> None:
        value = make("")
        for token in ["a", "b", "c"]:
            value.push_str_if(", ", lambda s, _sep: bool(s)).push_str(token)
        assert value == "a, b, c"


class TestTruncateIf:
    """truncate_if cuts to the length the predicate returns."""

    def test_some(self, make) -> None:
        assert make("hey you").truncate_if(cut_suffix(" you")) == "hey"

    def test_none(self, make) -> None:
        assert make("hey you").truncate_if(cut_suffix(" ble")) == "hey you"

    def test_drop_trailing_separator(self, make) -> None:
        value = make("")
        for token in ["a", "b", "c"]:
            value.push_str(token).push(",")
        assert value.truncate_if(cut_suffix(",")) == "a,b,c"

    def test_zero_clears(self, make) -> None:
        assert make("abc").truncate_if(lambda s: 0) == ""


class TestCombinatorsOnHandle:
    """Combinators on a handle mutate the original buffer."""

    def test_all_three(self) -> None:
        buf = TextBuffer("hey")
        (
            FluentRef(buf)
            .push_if(",", not_empty)
            .push_str_if(" you!", both_non_empty)
            .truncate_if(cut_suffix("!"))
        )
        assert buf == "hey, you"

    def test_loop_over_handle(self) -> None:
        buf = TextBuffer()
        for token in ["x", "y"]:
            fluent(buf).push_if(",", not_empty).push_str(token)
        assert buf == "x,y"
