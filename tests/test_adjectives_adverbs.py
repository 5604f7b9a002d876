# tests/test_adjectives_adverbs.py
from morphology.english import syllable_count


def test_syllable_count():
    assert syllable_count("big") == 1
    assert syllable_count("large") == 1
    assert syllable_count("happy") == 2
    assert syllable_count("simple") == 2
    assert syllable_count("beautiful") == 3
    assert syllable_count("") == 0


def test_comparatives(engine):
    assert engine.to_comparative("big") == "bigger"
    assert engine.to_comparative("happy") == "happier"
    assert engine.to_comparative("large") == "larger"
    assert engine.to_comparative("fast") == "faster"
    assert engine.to_comparative("simple") == "simpler"
    assert engine.to_comparative("narrow") == "narrower"
    assert engine.to_comparative("new") == "newer"
    assert engine.to_comparative("good") == "better"
    assert engine.to_comparative("beautiful") == "more beautiful"
    assert engine.to_comparative("interesting") == "more interesting"


def test_superlatives(engine):
    assert engine.to_superlative("big") == "biggest"
    assert engine.to_superlative("happy") == "happiest"
    assert engine.to_superlative("large") == "largest"
    assert engine.to_superlative("good") == "best"
    assert engine.to_superlative("bad") == "worst"
    assert engine.to_superlative("beautiful") == "most beautiful"


def test_degree_case_matching(engine):
    assert engine.to_comparative("Big") == "Bigger"
    assert engine.to_superlative("HOT") == "HOTTEST"
    assert engine.to_comparative("Beautiful") == "More beautiful"


def test_adjective_to_adverb(engine):
    assert engine.to_adverb("quick") == "quickly"
    assert engine.to_adverb("happy") == "happily"
    assert engine.to_adverb("basic") == "basically"
    assert engine.to_adverb("public") == "publicly"
    assert engine.to_adverb("simple") == "simply"
    assert engine.to_adverb("gentle") == "gently"
    assert engine.to_adverb("full") == "fully"
    assert engine.to_adverb("good") == "well"
    assert engine.to_adverb("true") == "truly"
    assert engine.to_adverb("Quick") == "Quickly"


def test_adverb_to_adjective(engine):
    assert engine.adverb_to_adjective("quickly") == "quick"
    assert engine.adverb_to_adjective("happily") == "happy"
    assert engine.adverb_to_adjective("basically") == "basic"
    assert engine.adverb_to_adjective("simply") == "simple"
    assert engine.adverb_to_adjective("terribly") == "terrible"
    assert engine.adverb_to_adjective("really") == "real"
    assert engine.adverb_to_adjective("carefully") == "careful"
    assert engine.adverb_to_adjective("fully") == "full"
    assert engine.adverb_to_adjective("well") == "good"
    assert engine.adverb_to_adjective("publicly") == "public"
    assert engine.adverb_to_adjective("very") == "very"


def test_overrides(engine):
    engine.update_overrides(lambda o: o.comparative.update({"fun": "more fun"}))
    engine.update_overrides(lambda o: o.superlative.update({"fun": "most fun"}))
    engine.update_overrides(lambda o: o.adverb.update({"fast": "fastly"}))
    engine.update_overrides(lambda o: o.adjective.update({"hardly": "hard"}))

    assert engine.to_comparative("fun") == "more fun"
    assert engine.to_superlative("fun") == "most fun"
    assert engine.to_adverb("fast") == "fastly"
    assert engine.adverb_to_adjective("hardly") == "hard"


def test_empty_input(engine):
    assert engine.to_comparative("") == ""
    assert engine.to_adverb("") == ""
    assert engine.adverb_to_adjective("") == ""
