"""Print transformed articles from the configured database as JSON.

Usage:
    python -m scripts.preview_articles             # newest ARTICLES_LIMIT articles
    python -m scripts.preview_articles --limit 3   # newest 3
    python -m scripts.preview_articles --id 42     # one article, detail view
"""

import argparse
import json
import sys

from jobs_api.config import get_settings
from jobs_api.middleware import configure_logging
from jobs_api.services.database import (
    InvalidInputError,
    StorageError,
    fetch_many,
    fetch_one,
    parse_record_id,
)
from jobs_api.services.transform import (
    replacement_trend,
    risk_trend,
    to_display_article,
)

configure_logging(get_settings().log_level)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--id", dest="article_id", default=None)
    args = parser.parse_args(argv)

    try:
        if args.article_id is not None:
            record = fetch_one(parse_record_id(args.article_id))
            if record is None:
                print(f"Article {args.article_id} not found.", file=sys.stderr)
                return 1
            articles = [to_display_article(record, trend_variant=risk_trend)]
        else:
            limit = args.limit or get_settings().articles_limit
            articles = [
                to_display_article(r, trend_variant=replacement_trend)
                for r in fetch_many(limit)
            ]
    except InvalidInputError as e:
        print(str(e), file=sys.stderr)
        return 2
    except StorageError as e:
        print(f"Database error: {e}", file=sys.stderr)
        return 1

    payload = [a.model_dump(mode="json", by_alias=True, exclude_none=True) for a in articles]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
