"""Tests for aggregate_reviews.helpers and cli modules."""

from unittest.mock import patch

import pytest

from aggregate_reviews.helpers import parse_aggregate_reviews_args
from common.config import Config, RemoteConfig
from normalize_products.models import NormalizedEntry


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_aggregate_reviews_args([])
        assert args.config is None
        assert args.limit is None
        assert args.remote_timeout is None
        assert args.local_only is False
        assert args.load_local is False

    def test_flags(self) -> None:
        args = parse_aggregate_reviews_args(
            ["--config", "local", "--limit", "5", "--remote-timeout", "2.5", "--local-only", "--load-local"]
        )
        assert args.config == "local"
        assert args.limit == 5
        assert args.remote_timeout == 2.5
        assert args.local_only is True
        assert args.load_local is True

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(SystemExit):
            parse_aggregate_reviews_args(["--remote-timeout", "0"])


class TestMain:
    @patch("aggregate_reviews.cli.save_jsonl_records_local")
    @patch("aggregate_reviews.cli.build_catalog")
    @patch("aggregate_reviews.cli.load_config")
    def test_local_only_skips_client(self, mock_config, mock_build, mock_save) -> None:
        mock_config.return_value = Config(remote=RemoteConfig(limit=7, deadline=3.0))
        mock_build.return_value = []

        from aggregate_reviews.cli import main
        main(["--local-only", "--content-dir", "site/content"])

        kwargs = mock_build.call_args.kwargs
        assert kwargs["client"] is None
        assert kwargs["content_dir"] == "site/content"
        assert kwargs["limit"] == 7
        assert kwargs["remote_timeout"] == 3.0
        mock_save.assert_not_called()

    @patch("aggregate_reviews.cli.save_jsonl_records_local")
    @patch("aggregate_reviews.cli.build_catalog")
    @patch("aggregate_reviews.cli.load_config")
    def test_load_local_saves_catalog(self, mock_config, mock_build, mock_save) -> None:
        mock_config.return_value = Config()
        entry = NormalizedEntry(slug="a", title="A", date="2024-01-01", description="d", category="general")
        mock_build.return_value = [entry]

        from aggregate_reviews.cli import main
        main(["--load-local", "--output-dir", "out"])

        assert mock_build.call_args.kwargs["client"] is not None
        mock_save.assert_called_once_with([entry], "review_catalog", "out")
