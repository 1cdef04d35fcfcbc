"""Unit tests for pruning empty values from models."""

import math

from contentschema.services.schema import prune, sanitize
from contentschema.services.schema.sanitizer import is_falsy


class TestIsFalsy:
    """Tests for is_falsy."""

    def test_scalars(self) -> None:
        """Empty scalars are falsy, the rest are not."""
        for value in (None, "", 0, 0.0, False, math.nan):
            assert is_falsy(value), value
        for value in ("x", 1, -1, 0.5, True):
            assert not is_falsy(value), value

    def test_containers_never_falsy(self) -> None:
        """Empty containers do not count as falsy entries."""
        assert not is_falsy({})
        assert not is_falsy([])


class TestSanitize:
    """Tests for the in-place sanitize."""

    def test_mixed_model(self) -> None:
        """Empty scalars and empty objects go, booleans and text stay."""
        model = {"a": "", "b": False, "c": 0, "d": {"e": ""}, "f": "x"}
        assert sanitize(model) is True
        assert model == {"b": False, "f": "x"}

    def test_everything_removed(self) -> None:
        """A model left without keys reports False."""
        model = {"a": ""}
        assert sanitize(model) is False
        assert model == {}

    def test_empty_model(self) -> None:
        """An empty model stays empty."""
        model: dict = {}
        assert sanitize(model) is False

    def test_same_object_mutated(self) -> None:
        """sanitize keeps the caller's dict identity."""
        model = {"a": None, "b": "x"}
        original = model
        sanitize(model)
        assert model is original
        assert original == {"b": "x"}

    def test_nan_removed(self) -> None:
        """NaN counts as empty."""
        model = {"score": math.nan, "title": "x"}
        sanitize(model)
        assert model == {"title": "x"}

    def test_true_kept(self) -> None:
        """True survives like any boolean."""
        model = {"published": True}
        assert sanitize(model) is True
        assert model == {"published": True}


class TestPrune:
    """Tests for the pure prune."""

    def test_input_untouched(self) -> None:
        """prune never mutates its argument."""
        model = {"a": "", "b": {"c": "", "d": "x"}}
        pruned, has_content = prune(model)
        assert has_content is True
        assert pruned == {"b": {"d": "x"}}
        assert model == {"a": "", "b": {"c": "", "d": "x"}}

    def test_object_of_only_false_removed(self) -> None:
        """An object whose entries are all falsy goes, booleans included."""
        pruned, _ = prune({"flags": {"a": False, "b": False}, "title": "x"})
        assert pruned == {"title": "x"}

    def test_nested_empty_containers_collapse(self) -> None:
        """Objects emptied by recursion are removed too."""
        pruned, has_content = prune({"a": {"b": {"c": {}}, "d": {"e": [None]}}})
        assert pruned == {}
        assert has_content is False

    def test_deep_content_kept(self) -> None:
        """Only the empty branches of a deep tree are removed."""
        model = {"seo": {"title": "", "meta": {"robots": "noindex", "canonical": ""}}}
        pruned, _ = prune(model)
        assert pruned == {"seo": {"meta": {"robots": "noindex"}}}

    def test_empty_list_removed(self) -> None:
        """An empty list is removed."""
        assert prune({"tags": [], "title": "x"}) == ({"title": "x"}, True)

    def test_list_of_falsy_removed(self) -> None:
        """A list holding only empty values is removed."""
        assert prune({"tags": ["", None, 0], "title": "x"}) == ({"title": "x"}, True)

    def test_list_keeps_its_items(self) -> None:
        """Falsy items inside a list with content are not removed one by one."""
        pruned, _ = prune({"tags": ["", "news", 0]})
        assert pruned == {"tags": ["", "news", 0]}

    def test_list_items_pruned_in_place(self) -> None:
        """Objects inside a list are pruned but keep their position."""
        model = {"links": [{"label": "Home", "url": ""}, {"label": "", "url": ""}]}
        pruned, _ = prune(model)
        assert pruned == {"links": [{"label": "Home"}, {}]}

    def test_list_of_emptied_objects_removed(self) -> None:
        """A list whose objects all prune to nothing is removed."""
        pruned, has_content = prune({"links": [{"label": ""}, {"url": None}]})
        assert pruned == {}
        assert has_content is False

    def test_list_of_booleans_removed_when_all_false(self) -> None:
        """A list of only False values counts as empty."""
        assert prune({"flags": [False, False]}) == ({}, False)


class TestSanitizeInPlace:
    """Tests that sanitize prunes nested containers without replacing them."""

    def test_nested_dict_pruned_in_place(self) -> None:
        """A reference into the model sees the pruned nested dict."""
        seo = {"title": "", "robots": "noindex", "meta": {"canonical": "", "lang": "en"}}
        meta = seo["meta"]
        model = {"seo": seo}

        sanitize(model)

        assert model["seo"] is seo
        assert seo == {"robots": "noindex", "meta": {"lang": "en"}}
        assert meta == {"lang": "en"}

    def test_list_items_pruned_in_place(self) -> None:
        """Lists and their dict items keep their identity."""
        first = {"label": "Home", "url": ""}
        second = {"label": "", "url": ""}
        links = [first, second]
        model = {"links": links}

        sanitize(model)

        assert model["links"] is links
        assert links == [{"label": "Home"}, {}]
        assert first == {"label": "Home"}
        assert second == {}

    def test_matches_prune(self) -> None:
        """sanitize and prune agree on the result."""
        model = {
            "a": "",
            "b": False,
            "c": {"d": {"e": ""}, "f": [0, "x"], "g": ({"h": ""}, {"i": 1})},
            "j": [{"k": None}],
            "l": 2,
        }
        expected, expected_has_content = prune(model)

        assert sanitize(model) is expected_has_content
        assert model == expected
        assert model == {"b": False, "c": {"f": [0, "x"], "g": [{}, {"i": 1}]}, "l": 2}
