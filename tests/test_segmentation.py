"""Tests for sentence and word segmentation."""

from bpe_tokenizer.segmentation import has_alphanumeric, split_sentences, split_words


class TestSplitSentences:
    """Tests for split_sentences."""

    def test_empty(self):
        """Test that empty text has no sentences."""
        assert list(split_sentences("")) == []

    def test_without_words(self):
        """Test that whitespace and punctuation alone are not sentences."""
        assert list(split_sentences("  \n ")) == []
        assert list(split_sentences("...!?")) == []

    def test_two_sentences(self):
        """Test splitting at sentence terminators."""
        sentences = list(split_sentences("Hello, world! How are you?"))
        assert len(sentences) == 2
        assert sentences[0].startswith("Hello")
        assert sentences[1].startswith("How")

    def test_order_and_coverage(self):
        """Test that sentences come back in order and keep all words."""
        text = "One. Two. Three!"
        assert "".join(split_sentences(text)) == text


class TestSplitWords:
    """Tests for split_words."""

    def test_skips_spaces_and_punctuation(self):
        """Test that only words with letters or digits are kept."""
        assert list(split_words("Hello, world!")) == ["Hello", "world"]

    def test_numbers(self):
        """Test that numbers count as words."""
        assert list(split_words("Room 101.")) == ["Room", "101"]

    def test_contraction_stays_together(self):
        """Test that an apostrophe inside a word does not split it."""
        assert list(split_words("Don't stop")) == ["Don't", "stop"]

    def test_empty(self):
        """Test that empty text has no words."""
        assert list(split_words("")) == []


class TestHasAlphanumeric:
    """Tests for has_alphanumeric."""

    def test_letters_and_digits(self):
        """Test letters and digits across scripts."""
        assert has_alphanumeric("a")
        assert has_alphanumeric("7")
        assert has_alphanumeric("日")
        assert has_alphanumeric("é")

    def test_punctuation_and_space(self):
        """Test that punctuation and whitespace do not count."""
        assert not has_alphanumeric(" ")
        assert not has_alphanumeric(",!?")
        assert not has_alphanumeric("")
