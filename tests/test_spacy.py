"""Tests for the spaCy pipeline component."""

import unicodedata

import pytest

spacy = pytest.importorskip("spacy")

import latin_to_greek.spacy  # noqa: E402,F401  registers the factory
from latin_to_greek.spacy import (  # noqa: E402
    BetaCodeTokenizer,
    GreekTransliteratorComponent,
    get_transliterator_pipe,
)


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    if Doc.has_extension("greek"):
        Doc.remove_extension("greek")
    if Token.has_extension("greek"):
        Token.remove_extension("greek")


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


class TestGreekTransliterator:
    def test_factory_registered(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        assert "greek_transliterator" in nlp.pipe_names

    def test_doc_extension(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        doc = nlp("a)/nqrwpo/s e)stin.")
        assert doc._.greek == _nfc("ἄνθρωπός ἐστιν.")

    def test_token_extension(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        doc = nlp("logos kai qeos")
        assert [t._.greek for t in doc] == ["λογος", "και", "θεος"]

    def test_disable_final_sigma(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator", config={"final_sigma": False})
        doc = nlp("logos")
        assert doc._.greek == "λογοσ"

    def test_unknown_method(self):
        nlp = spacy.blank("xx")
        with pytest.raises(ValueError):
            nlp.add_pipe("greek_transliterator", config={"method": "neural"})

    def test_get_pipe(self):
        nlp = spacy.blank("xx")
        assert get_transliterator_pipe(nlp) is None
        nlp.add_pipe("greek_transliterator")
        assert isinstance(get_transliterator_pipe(nlp), GreekTransliteratorComponent)

    def test_serialization_roundtrip(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        pipe = nlp.get_pipe("greek_transliterator")
        data = pipe.to_bytes()
        assert pipe.from_bytes(data) is pipe

    def test_lazy_top_level_attribute(self):
        import latin_to_greek

        assert latin_to_greek.GreekTransliteratorComponent is GreekTransliteratorComponent

    def test_accented_tokens(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        doc = nlp("a)/nqrwpo/s e)stin.")
        assert [t.text for t in doc] == ["a)/nqrwpo/s", "e)stin", "."]
        assert [t._.greek for t in doc] == [_nfc("ἄνθρωπός"), _nfc("ἐστιν"), "."]

    def test_medial_sigma_kept_in_token(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator")
        doc = nlp("e)/sti qeo/s")
        assert doc[0]._.greek == _nfc("ἔστι")
        assert doc[1]._.greek == _nfc("θεός")

    def test_keep_default_tokenizer(self):
        nlp = spacy.blank("xx")
        nlp.add_pipe("greek_transliterator", config={"betacode_tokenizer": False})
        assert not isinstance(nlp.tokenizer, BetaCodeTokenizer)
        doc = nlp("logos")
        assert doc[0]._.greek == "λογος"


class TestBetaCodeTokenizer:
    def test_words_and_punctuation(self):
        nlp = spacy.blank("xx")
        tokenizer = BetaCodeTokenizer(nlp.vocab)
        doc = tokenizer("mh=nin a)/eide, qea\\!")
        assert [t.text for t in doc] == ["mh=nin", "a)/eide", ",", "qea\\", "!"]

    def test_text_preserved(self):
        nlp = spacy.blank("xx")
        tokenizer = BetaCodeTokenizer(nlp.vocab)
        text = "  lo/gos  12,\tA)cilley/s\n"
        assert tokenizer(text).text == text

    def test_stray_marker_is_own_token(self):
        nlp = spacy.blank("xx")
        doc = BetaCodeTokenizer(nlp.vocab)("/a")
        assert [t.text for t in doc] == ["/", "a"]

    def test_empty(self):
        nlp = spacy.blank("xx")
        assert len(BetaCodeTokenizer(nlp.vocab)("")) == 0

    def test_registered(self):
        create = spacy.registry.tokenizers.get("latin_to_greek.BetaCodeTokenizer.v1")()
        nlp = spacy.blank("xx")
        assert isinstance(create(nlp), BetaCodeTokenizer)
