# tests/test_conjugation.py
from app.core.domain.models import Aspect, Number, Person, Tense, Voice

FIRST, SECOND, THIRD = Person.FIRST, Person.SECOND, Person.THIRD
SG, PL = Number.SINGULAR, Number.PLURAL


class TestActiveVoice:
    def test_simple_present_past_future(self, engine):
        assert engine.conjugate("go", FIRST, SG, Tense.PRESENT) == "go"
        assert engine.conjugate("go", THIRD, SG, Tense.PRESENT) == "goes"
        assert engine.conjugate("play", SECOND, PL, Tense.PAST) == "played"
        assert engine.conjugate("eat", FIRST, PL, Tense.FUTURE) == "will eat"

    def test_progressive_perfect_and_perfect_progressive(self, engine):
        assert engine.conjugate("run", FIRST, SG, Tense.PRESENT, aspect=Aspect.PROGRESSIVE) == "am running"
        assert engine.conjugate("run", THIRD, SG, Tense.PAST, aspect=Aspect.PROGRESSIVE) == "was running"
        assert engine.conjugate("run", THIRD, PL, Tense.FUTURE, aspect=Aspect.PROGRESSIVE) == "will be running"
        assert engine.conjugate("write", THIRD, PL, Tense.PRESENT, aspect=Aspect.PERFECT) == "have written"
        assert engine.conjugate("write", THIRD, SG, Tense.PRESENT, aspect=Aspect.PERFECT) == "has written"
        assert (
            engine.conjugate("play", SECOND, SG, Tense.PAST, aspect=Aspect.PERFECT_PROGRESSIVE)
            == "had been playing"
        )
        assert (
            engine.conjugate("play", FIRST, PL, Tense.FUTURE, aspect=Aspect.PERFECT_PROGRESSIVE)
            == "will have been playing"
        )

    def test_be_uses_its_own_forms(self, engine):
        assert engine.conjugate("be", FIRST, SG, Tense.PRESENT) == "am"
        assert engine.conjugate("be", THIRD, SG, Tense.PAST) == "was"
        assert engine.conjugate("be", SECOND, SG, Tense.PAST) == "were"
        assert engine.conjugate("be", THIRD, PL, Tense.FUTURE) == "will be"


class TestPassiveVoice:
    def test_simple(self, engine):
        assert engine.conjugate("eat", THIRD, SG, Tense.PRESENT, voice=Voice.PASSIVE) == "is eaten"
        assert engine.conjugate("eat", FIRST, PL, Tense.PAST, voice=Voice.PASSIVE) == "were eaten"
        assert engine.conjugate("make", SECOND, SG, Tense.FUTURE, voice=Voice.PASSIVE) == "will be made"

    def test_progressive(self, engine):
        assert (
            engine.conjugate("write", FIRST, SG, Tense.PRESENT, aspect=Aspect.PROGRESSIVE, voice=Voice.PASSIVE)
            == "am being written"
        )
        assert (
            engine.conjugate("write", THIRD, SG, Tense.PAST, aspect=Aspect.PROGRESSIVE, voice=Voice.PASSIVE)
            == "was being written"
        )
        assert (
            engine.conjugate("eat", THIRD, SG, Tense.FUTURE, aspect=Aspect.PROGRESSIVE, voice=Voice.PASSIVE)
            == "will be being eaten"
        )

    def test_perfect_and_perfect_progressive(self, engine):
        assert (
            engine.conjugate("make", THIRD, PL, Tense.FUTURE, aspect=Aspect.PERFECT, voice=Voice.PASSIVE)
            == "will have been made"
        )
        assert (
            engine.conjugate("steal", FIRST, PL, Tense.PRESENT, aspect=Aspect.PERFECT, voice=Voice.PASSIVE)
            == "have been stolen"
        )
        assert (
            engine.conjugate(
                "eat", THIRD, SG, Tense.PRESENT, aspect=Aspect.PERFECT_PROGRESSIVE, voice=Voice.PASSIVE
            )
            == "has been being eaten"
        )


def test_overrides_flow_into_conjugation(engine):
    engine.update_overrides(lambda o: o.past.update({"yeet": "yote"}))
    engine.update_overrides(lambda o: o.third_s.update({"yeet": "yeetz"}))

    assert engine.conjugate("yeet", THIRD, SG, Tense.PAST) == "yote"
    assert engine.conjugate("yeet", THIRD, SG, Tense.PRESENT) == "yeetz"
    assert engine.conjugate("yeet", FIRST, SG, Tense.PRESENT, aspect=Aspect.PERFECT) == "have yote"


def test_lemma_is_normalized(engine):
    assert engine.conjugate("  Go ", THIRD, SG, Tense.PRESENT) == "goes"
    assert engine.conjugate("", THIRD, SG, Tense.PRESENT) == ""


def test_rules_can_be_used_without_an_engine(rules, no_overrides):
    assert rules.conjugate("go", THIRD, SG, Tense.PAST) == "went"
    assert rules.conjugate("go", THIRD, PL, Tense.PRESENT, Aspect.PERFECT, Voice.ACTIVE, no_overrides) == "have gone"
    assert rules.to_past("Go", no_overrides) == "Went"
    assert rules.negate(["He", "goes"], True, no_overrides) == ["He", "doesn't", "go"]
