"""Unit tests for schema text tokenization."""

from schemavec.embedding.tokenizer import STOP_WORDS, tokenize


def test_lowercases_and_splits_on_whitespace() -> None:
    assert tokenize("CREATE  TABLE\tUsers\n") == ["create", "table", "users"]


def test_punctuation_becomes_standalone_tokens() -> None:
    assert tokenize("foo(bar)") == ["foo", "(", "bar", ")"]
    assert tokenize("a int,b int;") == ["a", "int", ",", "b", "int", ";"]


def test_full_create_table_statement() -> None:
    tokens = tokenize("create table users (id int primary key, name varchar(50))")

    assert tokens == [
        "create", "table", "users", "(", "id", "int", "primary", "key", ",",
        "name", "varchar", "(", "50", ")", ")",
    ]


def test_empty_and_blank_text_yield_no_tokens() -> None:
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_stop_words_removed_only_when_enabled() -> None:
    text = "the orders of a customer"

    assert tokenize(text) == ["the", "orders", "of", "a", "customer"]
    assert tokenize(text, remove_stop_words=True) == ["orders", "customer"]


def test_stop_words_never_hide_keywords_the_extractors_use() -> None:
    keywords = {"on", "delete", "cascade", "set", "null", "update", "primary", "key", "id", "references"}

    assert not keywords & STOP_WORDS
