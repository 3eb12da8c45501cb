from glade.core.command_parser import MISSING, Verb, normalize_direction, parse, tokenize


def test_tokenize_splits_on_any_whitespace() -> None:
    assert tokenize("  Take   the\tKEY ") == ["take", "the", "key"]
    assert tokenize("   ") == []


def test_missing_pads_absent_arguments() -> None:
    command = parse("attack troll")

    assert command.verb is Verb.ATTACK
    assert command.padded(3) == ("troll", MISSING, MISSING)


def test_extra_arguments_are_dropped() -> None:
    assert parse("take rusty key").padded(1) == ("rusty",)


def test_missing_is_falsy_singleton() -> None:
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING


def test_unknown_verb_has_no_verb() -> None:
    command = parse("dance wildly")

    assert command.verb is None
    assert command.word == "dance"


def test_empty_input_has_no_verb() -> None:
    assert parse("").verb is None


def test_bare_direction_is_movement() -> None:
    command = parse("n")

    assert command.verb is Verb.GO
    assert command.args == ("n",)
    assert normalize_direction(command.args[0]) == "north"


def test_aliases() -> None:
    assert parse("i").verb is Verb.INV
    assert parse("inventory").verb is Verb.INV
    assert parse("get twig").verb is Verb.TAKE
    assert parse("get twig").args == ("twig",)
