# tests/test_nouns.py
"""
Noun number and possessives.
"""

import pytest


class TestPluralize:
    def test_regular_and_irregular(self, engine):
        assert engine.pluralize("cat") == "cats"
        assert engine.pluralize("bus") == "buses"
        assert engine.pluralize("baby") == "babies"
        assert engine.pluralize("child") == "children"
        assert engine.pluralize("box") == "boxes"
        assert engine.pluralize("church") == "churches"
        assert engine.pluralize("day") == "days"
        assert engine.pluralize("mouse") == "mice"

    def test_f_fe_and_o_endings(self, engine):
        assert engine.pluralize("knife") == "knives"
        assert engine.pluralize("leaf") == "leaves"
        assert engine.pluralize("roof") == "roofs"
        assert engine.pluralize("cliff") == "cliffs"
        assert engine.pluralize("potato") == "potatoes"
        assert engine.pluralize("piano") == "pianos"
        assert engine.pluralize("radio") == "radios"

    def test_invariant_and_uncountable(self, engine):
        assert engine.pluralize("sheep") == "sheep"
        assert engine.pluralize("information") == "information"
        assert engine.pluralize("Fish") == "Fish"

    def test_classical_plurals(self, engine):
        assert engine.pluralize("cactus", conservative=False) == "cacti"
        assert engine.pluralize("analysis") == "analyses"
        assert engine.pluralize("criterion") == "criteria"
        assert engine.pluralize("index") == "indices"

    def test_conservative_prefers_anglicized_forms(self, engine):
        assert engine.pluralize("cactus", conservative=True) == "cactuses"
        assert engine.pluralize("index", conservative=True) == "indexes"
        # No anglicized plural in common use.
        assert engine.pluralize("analysis", conservative=True) == "analyses"

    def test_conservative_leaves_proper_names_alone(self, engine):
        assert engine.pluralize("John", conservative=True) == "John"
        assert engine.pluralize("NASA", conservative=True) == "NASA"
        assert engine.pluralize("John", conservative=False) == "Johns"

    def test_case_matching(self, engine):
        assert engine.pluralize("Child") == "Children"
        assert engine.pluralize("CHILD") == "CHILDREN"
        assert engine.pluralize("Baby") == "Babies"

    def test_empty(self, engine):
        assert engine.pluralize("") == ""
        assert engine.singularize("") == ""


class TestSingularize:
    def test_regular_and_irregular(self, engine):
        assert engine.singularize("cats") == "cat"
        assert engine.singularize("buses") == "bus"
        assert engine.singularize("babies") == "baby"
        assert engine.singularize("children") == "child"
        assert engine.singularize("boxes") == "box"
        assert engine.singularize("churches") == "church"
        assert engine.singularize("horses") == "horse"
        assert engine.singularize("mice") == "mouse"
        assert engine.singularize("CATS") == "CAT"

    def test_exception_sets_in_reverse(self, engine):
        assert engine.singularize("knives") == "knife"
        assert engine.singularize("leaves") == "leaf"
        assert engine.singularize("wolves") == "wolf"
        assert engine.singularize("gloves") == "glove"
        assert engine.singularize("movies") == "movie"
        assert engine.singularize("shoes") == "shoe"
        assert engine.singularize("heroes") == "hero"
        assert engine.singularize("potatoes") == "potato"

    def test_classical(self, engine):
        assert engine.singularize("cacti") == "cactus"
        assert engine.singularize("analyses") == "analysis"
        assert engine.singularize("criteria") == "criterion"

    def test_already_singular_words(self, engine):
        assert engine.singularize("glass") == "glass"
        assert engine.singularize("virus") == "virus"
        assert engine.singularize("sheep") == "sheep"
        assert engine.singularize("gizmosx") == "gizmosx"

    def test_plain_s_is_stripped(self, engine):
        assert engine.singularize("pants") == "pant"


@pytest.mark.parametrize("noun", ["cat", "bus", "baby", "child", "knife", "potato", "cactus", "analysis", "box"])
def test_singularize_inverts_pluralize(engine, noun):
    assert engine.singularize(engine.pluralize(noun)) == noun


class TestPossessive:
    def test_possessives(self, engine):
        assert engine.possessive("class") == "class'"
        assert engine.possessive("bus") == "bus'"
        assert engine.possessive("James") == "James'"
        assert engine.possessive("children") == "children's"
        assert engine.possessive("child") == "child's"
        assert engine.possessive("CHILD") == "CHILD'S"
        assert engine.possessive("") == ""


class TestNounOverrides:
    def test_do_not_change_blocks_both_directions(self, engine):
        engine.update_overrides(lambda o: o.do_not_change.add("pants"))

        assert engine.pluralize("pants") == "pants"
        assert engine.singularize("pants") == "pants"
        assert engine.pluralize("PaNtS") == "PaNtS"
        assert engine.singularize("PaNtS") == "PaNtS"

    def test_plural_override_is_case_matched(self, engine):
        engine.update_overrides(lambda o: o.plural.update({"mouse": "mouses"}))

        assert engine.pluralize("mouse") == "mouses"
        assert engine.pluralize("Mouse") == "Mouses"
        assert engine.pluralize("MOUSE") == "MOUSES"

    def test_no_implicit_reverse_mapping(self, engine):
        engine.update_overrides(lambda o: o.plural.update({"gizmo": "gizmosx"}))

        assert engine.pluralize("gizmo") == "gizmosx"
        assert engine.singularize("gizmosx") == "gizmosx"

        engine.update_overrides(lambda o: o.singular.update({"gizmosx": "gizmo"}))
        assert engine.singularize("gizmosx") == "gizmo"
