"""ranking モジュールのユニットテスト."""

from meli_collector.models import Listing
from meli_collector.ranking import classify_listings, is_exact_match, tokenize_query


def _listings(*titles: str) -> list[Listing]:
    return [
        Listing(position=i, title=t, price=str(100 * i), link=f"https://x/{i}")
        for i, t in enumerate(titles, start=1)
    ]


class TestTokenizeQuery:
    """tokenize_query のテスト."""

    def test_lowercase_and_split(self):
        assert tokenize_query("  Mesa   de\tCENTRO ") == ["mesa", "de", "centro"]

    def test_empty(self):
        assert tokenize_query("") == []
        assert tokenize_query("   ") == []


class TestIsExactMatch:
    """is_exact_match のテスト."""

    def test_all_tokens_any_order(self):
        tokens = tokenize_query("mesa de centro")
        assert is_exact_match("Centro De Mesa Rústico", tokens)

    def test_missing_token(self):
        tokens = tokenize_query("mesa de centro")
        assert not is_exact_match("Mesa de comedor", tokens)

    def test_word_boundary(self):
        """部分文字列では一致しないこと (mesa ≠ mesada)."""
        assert not is_exact_match("Mesada de granito", ["mesa"])

    def test_punctuation_is_boundary(self):
        assert is_exact_match("Laptop, HP-15 (2024)", ["laptop", "hp"])

    def test_accented_words(self):
        assert is_exact_match("Sillón Reclinable", ["sillón"])
        assert not is_exact_match("Sillones", ["sillón"])

    def test_regex_characters_escaped(self):
        assert not is_exact_match("Cable USB", ["u.b"])

    def test_tokens_with_symbols(self):
        """記号で始まる・終わるトークンも単語として一致すること."""
        assert is_exact_match("Libro C++ para principiantes", tokenize_query("c++"))
        assert is_exact_match("Adaptador .NET", [".net"])
        assert not is_exact_match("Libro C++11", ["c++"])

    def test_empty_tokens_always_match(self):
        assert is_exact_match("Cualquier cosa", [])


class TestClassifyListings:
    """classify_listings のテスト."""

    def test_exact_first_stable(self):
        """完全一致が先頭、各グループ内の順序は維持されること."""
        listings = _listings(
            "Mesa plegable",
            "Mesa de centro moderna",
            "Mesada de granito",
            "Centro de mesa decorativo",
            "Mesa de noche",
        )
        ranked = classify_listings(listings, "mesa de centro")

        assert [r.title for r in ranked] == [
            "Mesa de centro moderna",
            "Centro de mesa decorativo",
            "Mesa plegable",
            "Mesada de granito",
            "Mesa de noche",
        ]
        assert [r.exact_match for r in ranked] == [True, True, False, False, False]

    def test_positions_renumbered(self):
        listings = _listings("Funda", "Laptop Dell", "Mouse", "Laptop HP")
        ranked = classify_listings(listings, "laptop")

        assert [r.position for r in ranked] == [1, 2, 3, 4]
        assert [r.title for r in ranked] == ["Laptop Dell", "Laptop HP", "Funda", "Mouse"]

    def test_fields_carried_over(self):
        listings = _listings("Mouse", "Laptop Dell")
        ranked = classify_listings(listings, "laptop")

        assert ranked[0].price == "200"
        assert ranked[0].link == "https://x/2"
        assert ranked[1].price == "100"

    def test_laptop_scenario(self):
        """全商品が完全一致なら順序はそのまま."""
        listings = _listings("Laptop HP 15", "Funda para laptop", "Laptop Dell")
        ranked = classify_listings(listings, "laptop")

        assert [r.title for r in ranked] == ["Laptop HP 15", "Funda para laptop", "Laptop Dell"]
        assert [r.position for r in ranked] == [1, 2, 3]
        assert all(r.exact_match for r in ranked)

    def test_no_exact_matches(self):
        listings = _listings("Silla", "Banco")
        ranked = classify_listings(listings, "mesa")

        assert [r.title for r in ranked] == ["Silla", "Banco"]
        assert not any(r.exact_match for r in ranked)

    def test_empty_query_all_exact(self):
        ranked = classify_listings(_listings("Silla", "Banco"), "")
        assert all(r.exact_match for r in ranked)

    def test_empty_listings(self):
        assert classify_listings([], "mesa") == []

    def test_input_not_mutated(self):
        listings = _listings("Silla", "Mesa")
        classify_listings(listings, "mesa")

        assert [l.title for l in listings] == ["Silla", "Mesa"]
        assert [l.position for l in listings] == [1, 2]
