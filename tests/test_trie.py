import sys

import pytest

from triedict.trie import Trie, TrieNode


def make_trie(*words):
    t = Trie()
    for w in words:
        t.insert(w)
    return t


def test_insert_and_search():
    t = make_trie("car", "card", "cart", "cat")

    assert t.search("car") is True
    assert t.search("card") is True
    assert t.search("cart") is True
    assert t.search("cat") is True

    # Prefixes and extensions are not words
    assert t.search("ca") is False
    assert t.search("cars") is False
    assert t.search("dog") is False


def test_insert_twice_reports_duplicate():
    t = Trie()
    assert t.insert("hello") is True
    assert t.insert("hello") is False
    assert t.get_all_words() == ["hello"]
    assert len(t) == 1


def test_insert_creates_one_node_per_new_character():
    t = make_trie("hell")
    t.insert("hello")
    node = t.root
    for ch in "hell":
        assert list(node.children) == [ch]
        node = node.children[ch]
    assert node.is_terminal
    assert list(node.children) == ["o"]
    assert node.children["o"].character == "o"


def test_search_miss_does_not_create_nodes():
    t = make_trie("cat")
    assert t.search("cow") is False
    assert list(t.root.children["c"].children) == ["a"]


def test_delete_word():
    t = make_trie("hello")
    assert t.delete("hello") is True
    assert t.search("hello") is False
    assert t.root.children == {}
    assert len(t) == 0


def test_delete_prefix_keeps_longer_word():
    t = make_trie("hell", "hello")
    assert t.delete("hell") is True
    assert t.search("hell") is False
    assert t.search("hello") is True


def test_delete_longer_word_keeps_prefix():
    t = make_trie("hell", "hello")
    assert t.delete("hello") is True
    assert t.search("hell") is True
    node = t._walk("hell")
    assert node.is_terminal
    assert node.children == {}


def test_delete_prunes_only_unshared_branch():
    t = make_trie("bat", "batch", "bath")

    assert t.delete("batch") is True
    bat = t._walk("bat")
    assert sorted(bat.children) == ["h"]
    assert t.search("bath") is True

    assert t.delete("bath") is True
    assert t.delete("bat") is True
    assert t.root.children == {}


def test_delete_missing_word():
    t = Trie()
    assert t.delete("hello") is False

    t = make_trie("hello")
    before = t.format_structure()
    assert t.delete("hell") is False
    assert t.delete("helicopter") is False
    assert t.delete("hello!") is False
    assert t.format_structure() == before
    assert t.search("hello") is True
    assert len(t) == 1


def test_words_longer_than_recursion_limit():
    long_word = "a" * (sys.getrecursionlimit() + 500)
    t = make_trie(long_word, "ab")

    assert t.search(long_word) is True
    assert t.get_all_words() == [long_word, "ab"]
    assert t.auto_suggest("aaa") == [long_word]
    assert len(t.format_structure().splitlines()) == len(long_word) + 2

    assert t.delete(long_word) is True
    assert t.search(long_word) is False
    assert t.get_all_words() == ["ab"]
    assert t.format_structure() == "\n".join(["root", " └─a", "   └─b"])


def test_auto_suggest():
    t = make_trie("hello", "hell", "heaven", "heavy")
    assert set(t.auto_suggest("he")) == {"hello", "hell", "heaven", "heavy"}
    assert set(t.auto_suggest("hea")) == {"heaven", "heavy"}
    assert t.auto_suggest("hello") == ["hello"]
    assert t.auto_suggest("xyz") == []


def test_auto_suggest_full_prefix_match():
    t = make_trie("catastrophe", "catatonic", "caterpillar")
    assert set(t.auto_suggest("cat")) == {"catastrophe", "catatonic", "caterpillar"}


def test_get_all_words_is_sorted_and_unique():
    t = make_trie("orange", "apple", "grape", "banana", "apple")
    assert t.get_all_words() == ["apple", "banana", "grape", "orange"]
    assert set(iter(t)) == {"apple", "banana", "grape", "orange"}


def test_word_set_stays_consistent():
    t = Trie()
    for w in ["tree", "trie", "try", "tree", "true", "trip"]:
        t.insert(w)
    for w in ["try", "tr", "trip", "trips"]:
        t.delete(w)

    words = t.get_all_words()
    assert sorted(words) == ["tree", "trie", "true"]
    assert len(words) == len(set(words)) == len(t)
    assert all(t.search(w) for w in words)


def test_spelling_suggestions():
    t = make_trie("hello", "help")
    assert set(t.get_spelling_suggestions("helo")) == {"hello", "help"}
    assert t.get_spelling_suggestions("haaaaa") == []


def test_spelling_suggestions_only_same_first_letter():
    t = make_trie("hello", "cello", "jello")
    assert t.get_spelling_suggestions("hallo") == ["hello"]


def test_spelling_suggestions_missing_first_letter():
    t = make_trie("hello", "help")
    assert t.get_spelling_suggestions("xelo") == []


def test_spelling_suggestions_empty_word():
    t = make_trie("hello")
    with pytest.raises(ValueError):
        t.get_spelling_suggestions("")


def test_empty_string_is_a_word_only_when_inserted():
    t = make_trie("a")
    assert t.search("") is False
    assert t.delete("") is False

    assert t.insert("") is True
    assert t.root.is_terminal
    assert t.search("") is True
    assert set(t.get_all_words()) == {"", "a"}

    assert t.delete("") is True
    assert t.search("") is False
    assert t.search("a") is True


def test_non_string_input_rejected():
    t = Trie()
    with pytest.raises(TypeError):
        t.insert(None)
    with pytest.raises(TypeError):
        t.search(42)
    assert 42 not in t


def test_is_prefix():
    t = make_trie("apple", "app", "apply")
    assert t.is_prefix("ap") is True
    assert t.is_prefix("apple") is True
    assert t.is_prefix("") is True
    assert t.is_prefix("banana") is False


def test_contains_and_len():
    t = make_trie("cat", "dog")
    assert "cat" in t
    assert "ca" not in t
    assert len(t) == 2


def test_node_has_child():
    node = TrieNode("a")
    node.children["b"] = TrieNode("b")
    assert node.has_child("b")
    assert not node.has_child("c")
    assert not node.is_terminal


def test_format_structure():
    t = make_trie("ab", "ac", "b")
    assert t.format_structure() == "\n".join([
        "root",
        " ├─a",
        " │ ├─b",
        " │ └─c",
        " └─b",
    ])


def test_print_structure(capsys):
    make_trie("hi").print_structure()
    out = capsys.readouterr().out
    assert "root" in out
    assert "└─h" in out
    assert "└─i" in out
