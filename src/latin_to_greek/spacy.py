"""
spaCy integration for latin-to-greek.

Provides a pipeline component that transliterates Beta Code documents and
tokens into polytonic Greek, and a tokenizer that keeps each Beta Code word
(letters with their accent and breathing markers) in one token.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("greek_transliterator")
    >>> doc = nlp("a)/nqrwpo/s e)stin.")
    >>> doc._.greek
    'ἄνθρωπός ἐστιν.'
"""

import re
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token
from spacy.util import get_words_and_spaces, registry
from spacy.vocab import Vocab

from latin_to_greek.betacode._rules import BetaCodeConverter, tokenize

__all__ = [
    "BetaCodeTokenizer",
    "GreekTransliteratorComponent",
    "create_betacode_tokenizer",
    "create_greek_transliterator",
    "get_transliterator_pipe",
]

# Passthrough text splits into words and single punctuation marks
_PASSTHROUGH_TOKEN = re.compile(r"\w+|[^\w\s]")


# =============================================================================
# Beta Code Tokenizer
# =============================================================================


class BetaCodeTokenizer:
    """
    Tokenizer that never splits a Beta Code word.

    spaCy's default rules treat ``/``, ``(`` and ``)`` as punctuation and
    split ``a)/nqrwpo/s`` apart. Here every convertible run (letters plus
    their markers) is one token; the text between runs is split into
    words and single punctuation marks.
    """

    def __init__(self, vocab: Vocab) -> None:
        self.vocab = vocab

    def __call__(self, text: str) -> Doc:
        words = []
        for run in tokenize(text):
            if run.is_convertible:
                words.append(run.text)
            else:
                words.extend(_PASSTHROUGH_TOKEN.findall(run.text))
        words, spaces = get_words_and_spaces(words, text)
        return Doc(self.vocab, words=words, spaces=spaces)

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetaCodeTokenizer":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetaCodeTokenizer":
        return self


@registry.tokenizers("latin_to_greek.BetaCodeTokenizer.v1")
def create_betacode_tokenizer():
    """Registered tokenizer for ``[nlp.tokenizer]`` in a spaCy config."""

    def create(nlp: Language) -> BetaCodeTokenizer:
        return BetaCodeTokenizer(nlp.vocab)

    return create


# =============================================================================
# Greek Transliterator Component
# =============================================================================


@Language.factory(
    "greek_transliterator",
    default_config={"method": "rules", "final_sigma": True, "betacode_tokenizer": True},
    assigns=["doc._.greek", "token._.greek"],
)
def create_greek_transliterator(
    nlp: Language,
    name: str,
    method: str = "rules",
    final_sigma: bool = True,
    betacode_tokenizer: bool = True,
) -> "GreekTransliteratorComponent":
    """Create a Beta Code to Greek pipeline component.

    With ``betacode_tokenizer`` (the default) the pipeline's tokenizer is
    replaced by BetaCodeTokenizer so tokens line up with Beta Code words.
    """
    if betacode_tokenizer and not isinstance(nlp.tokenizer, BetaCodeTokenizer):
        nlp.tokenizer = BetaCodeTokenizer(nlp.vocab)
    return GreekTransliteratorComponent(
        nlp, name, method=method, final_sigma=final_sigma
    )


class GreekTransliteratorComponent:
    """
    spaCy pipeline component for Beta Code transliteration.

    Extensions:
        - Doc._.greek: Full transliterated text.
        - Token._.greek: Transliterated token text.

    Tokens are converted on their own. Under BetaCodeTokenizer a token is
    a whole Beta Code word; under another tokenizer a word split at a
    marker loses that marker and may end in a final sigma.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        method: str = "rules",
        final_sigma: bool = True,
    ) -> None:
        self.name = name
        self.method = method
        self.final_sigma = final_sigma

        if method != "rules":
            raise ValueError(
                f"Unknown method: {method}. Currently only 'rules' is supported."
            )

        self._converter = BetaCodeConverter(final_sigma=final_sigma)

        if not Doc.has_extension("greek"):
            Doc.set_extension("greek", default=None)
        if not Token.has_extension("greek"):
            Token.set_extension("greek", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.greek = self._converter.convert(doc.text)

        for token in doc:
            token._.greek = self._converter.convert(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "GreekTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "GreekTransliteratorComponent":
        return self


def get_transliterator_pipe(nlp: Language) -> Optional[GreekTransliteratorComponent]:
    """Get the Greek transliterator component from a pipeline."""
    if "greek_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("greek_transliterator")
    return None
