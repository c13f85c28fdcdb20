"""
Quick smoke test, run with: python smoke_preview.py
Fetches link-preview metadata for a few live URLs. Needs network access.
"""

import json
from metafetcher import MetaFetchError, fetch_metadata, fetch_metadata_unchecked

URLS = [
    "http://example.com",
    "https://5lovelanguages.com/learn",
    "https://www.python.org/",
]

# URLs whose robots.txt check we skip, to show the unchecked path
SKIP_ROBOTS = {
    "https://www.python.org/",
}


def main():
    for url in URLS:
        skip = url in SKIP_ROBOTS
        note = " [robots.txt bypassed for demo]" if skip else ""
        print(f"\n>>> Previewing: {url}{note}\n")
        fetch = fetch_metadata_unchecked if skip else fetch_metadata
        try:
            print(json.dumps(fetch(url).to_dict(), indent=2))
        except MetaFetchError as exc:
            print(f"{exc.code}: {exc}")
        print("-" * 80)


if __name__ == "__main__":
    main()
