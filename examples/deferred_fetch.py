"""
Example: Issue several fetches at once and read them lazily

Each fetch runs on a worker thread. Nothing blocks until a response
attribute is read, so the requests overlap.
"""

import urllib.error
import urllib.request

from lazyfetch import ApplicationError, FetchService, Response


def urllib_fetch(url: str) -> Response:
    """Fetch a URL with urllib and hand back a completed Response."""
    try:
        with urllib.request.urlopen(url, timeout=10) as r:
            return Response(r.status, r.reason, "1.1", r.headers.items(), r.read())
    except urllib.error.HTTPError as e:
        # 4xx/5xx still carry a body the API wants surfaced.
        return Response(e.code, e.reason, "1.1", e.headers.items(), e.read())


def main() -> None:
    urls = [
        "https://httpbin.org/json",
        "https://httpbin.org/status/400",
        "https://httpbin.org/status/503",
    ]
    with FetchService(urllib_fetch, max_workers=3) as service:
        responses = [service.fetch_async(url) for url in urls]

        for url, response in zip(urls, responses):
            try:
                # Body readers raise the API's error as is.
                body = response.text
            except ApplicationError as e:
                print(f"{url}: application error {e.status_code}: {e.message!r}")
                continue
            print(f"{url}: {response.status_code} {body[:60]!r}")


if __name__ == "__main__":
    main()
