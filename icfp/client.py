"""Send the player key to the contest server and report the outcome.

Usage: icfp-client <serverUrl> <playerKey>

Exit codes: 0 on HTTP 200, 2 on any other HTTP status (redirects included,
they are not followed), 1 on any exception (bad arguments, transport failure,
malformed URL). All output, including tracebacks, goes to stdout.
"""
import logging
import sys
import traceback

import requests

logger = logging.getLogger(__name__)

HTTP_OK = 200


def post_player_key(server_url: str, player_key: str) -> requests.Response:
    # Proxy and CA settings from the environment are ignored
    with requests.Session() as session:
        session.trust_env = False
        return session.post(server_url, data=player_key.encode(), allow_redirects=False)


def run(args) -> int:
    try:
        server_url, player_key = args

        print(f"ServerUrl: {server_url}; PlayerKey: {player_key}")

        logger.debug(f"POST {server_url} ({len(player_key)} bytes)")
        r = post_player_key(server_url, player_key)
        body = r.text
    except Exception:
        print("Unexpected server response:")
        traceback.print_exc(file=sys.stdout)
        return 1

    if r.status_code != HTTP_OK:
        print("Unexpected server response:")
        print(f"HTTP code: {r.status_code}")
        print(f"Response body: {body}")
        return 2

    print(f"Server response: {body}")
    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
