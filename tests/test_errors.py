"""Tests for the error values."""

import copy
import pickle

import pytest
from relname.core.errors import BadName, BadRelatorCode, EmptyPartError, quote
from relname.core.name import new_name1, new_name2


def make_errors():
    sarah, _ = new_name2("Sarah A.", "Hoyt")
    return [
        EmptyPartError(2, "", "Smith"),
        EmptyPartError(3, "James", "Tiptree", " "),
        BadRelatorCode(sarah, "Aut"),
        BadName("aut"),
    ]


class TestCopyAndPickle:
    """Errors are plain data and survive copying and pickling."""

    @pytest.mark.parametrize('err', make_errors(), ids=repr)
    def test_copy(self, err):
        assert copy.copy(err) == err
        assert str(copy.copy(err)) == str(err)

    @pytest.mark.parametrize('err', make_errors(), ids=repr)
    def test_deepcopy(self, err):
        assert copy.deepcopy(err) == err

    @pytest.mark.parametrize('err', make_errors(), ids=repr)
    def test_pickle(self, err):
        restored = pickle.loads(pickle.dumps(err))
        assert restored == err
        assert type(restored) is type(err)
        assert str(restored) == str(err)

    def test_fields_survive(self):
        err = pickle.loads(pickle.dumps(EmptyPartError(2, "", "Smith")))
        assert err.num_args == 2
        assert err.arg1 == ""
        assert err.arg2 == "Smith"
        assert err.arg3 == ""


class TestImmutability:
    """Fields cannot be reassigned, so hashes stay stable."""

    @pytest.mark.parametrize('field', ['num_args', 'arg1', 'arg2', 'arg3'])
    def test_empty_part_fields(self, field):
        err = EmptyPartError(2, "", "Smith")
        with pytest.raises(AttributeError):
            setattr(err, field, "")

    def test_relator_fields(self):
        err = BadRelatorCode(new_name1("Baen")[0], "Aut")
        with pytest.raises(AttributeError):
            err.code = "aut"
        with pytest.raises(AttributeError):
            err.name = new_name1("Tor")[0]

    def test_bad_name_code(self):
        with pytest.raises(AttributeError):
            BadName("aut").code = "edt"

    def test_args(self):
        err = EmptyPartError(2, "", "Smith")
        with pytest.raises(AttributeError):
            err.args = (2, "", "", "")

    def test_hash_is_stable(self):
        err = EmptyPartError(2, "", "Smith")
        h = hash(err)
        with pytest.raises(AttributeError):
            err.arg2 = ""
        assert hash(err) == h
        assert err in {EmptyPartError(2, "", "Smith")}


class TestQuote:
    """Arguments in messages show invisible characters as escapes."""

    @pytest.mark.parametrize('text,expected', [
        ("", '""'),
        ("Smith", '"Smith"'),
        (" \t ", '" \\t "'),
        ("\n\r", '"\\n\\r"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\\b", '"a\\\\b"'),
        ("\x1c", '"\\x1c"'),
        ("\xa0", '"\\u00a0"'),
        ("\u2003", '"\\u2003"'),
        ("«»", '"«»"'),
    ])
    def test_quote(self, text, expected):
        assert quote(text) == expected

    def test_no_break_space_argument(self):
        _, err = new_name1("\xa0")
        assert str(err) == 'empty or whitespace-only argument in new_name1("\\u00a0")'

    def test_control_character_argument(self):
        _, err = new_name1("\x1c")
        assert str(err) == 'empty or whitespace-only argument in new_name1("\\x1c")'


class TestArity:
    """Only an arity of 0 is reported as a bug."""

    def test_zero(self):
        assert str(EmptyPartError()).startswith("BUG: bad EmptyPartError value")

    def test_negative_shows_three_args(self):
        err = EmptyPartError(-1, "one", "", "three")
        assert err.blank_args() == [2]
        assert str(err) == 'empty or whitespace-only argument in new_name-1("one", "", "three")'
