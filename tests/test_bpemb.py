"""Tests for the BPEmb downloader."""

import pytest
import requests

from bpe_tokenizer.data import bpemb
from bpe_tokenizer.data.bpemb import BPEmbDownloader
from bpe_tokenizer.default_vocabs import DefaultVocab
from bpe_tokenizer.vocab import load_vocab


class FakeResponse:
    """Minimal stand-in for a streamed requests.Response."""

    def __init__(self, body: bytes, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.headers = {"content-length": str(len(body))}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]


class TestBPEmbDownloader:
    """Tests for BPEmbDownloader."""

    def test_url_for(self):
        """Test BPEmb download URLs."""
        assert BPEmbDownloader.url_for(DefaultVocab.SMALL) == (
            "https://bpemb.h-its.org/multi/multi.wiki.bpe.vs100000.vocab"
        )

    def test_download(self, tmp_path, monkeypatch):
        """Test that the file is streamed to disk."""
        body = "▁the\t-4\n▁a\t-5\n".encode("utf-8")
        requested = []

        def fake_get(url, **kwargs):
            requested.append(url)
            return FakeResponse(body)

        monkeypatch.setattr(bpemb.requests, "get", fake_get)

        downloader = BPEmbDownloader(output_dir=tmp_path / "vocab")
        path = downloader.download("small", show_progress=False)

        assert requested == [BPEmbDownloader.url_for("small")]
        assert path == tmp_path / "vocab" / "multi.wiki.bpe.vs100000.vocab"
        assert load_vocab(path).score("▁the") == -4
        assert not path.with_name(path.name + ".part").exists()

    def test_existing_file_is_kept(self, tmp_path, monkeypatch):
        """Test that an existing download is not fetched again."""
        existing = tmp_path / DefaultVocab.MEDIUM.source_name
        existing.write_text("x\t1\n", encoding="utf-8")

        def fail_get(url, **kwargs):
            raise AssertionError("should not download")

        monkeypatch.setattr(bpemb.requests, "get", fail_get)

        path = BPEmbDownloader(output_dir=tmp_path).download("medium")
        assert path == existing

    def test_http_error(self, tmp_path, monkeypatch):
        """Test that HTTP errors propagate and leave no file behind."""
        monkeypatch.setattr(
            bpemb.requests, "get", lambda url, **kwargs: FakeResponse(b"", 404)
        )

        with pytest.raises(requests.HTTPError):
            BPEmbDownloader(output_dir=tmp_path).download("large", show_progress=False)
        assert list(tmp_path.iterdir()) == []
