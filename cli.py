"""Small CLI for interacting with the ballot_box Flask server.

Usage examples:
    python cli.py --caller owner init
    python cli.py --caller owner create --description "Fund the library"
    python cli.py --caller alice vote --id 0
    python cli.py get --id 0
    python cli.py count
    python cli.py events
"""

from typing import Optional
import argparse

import requests

from ballot_box.config import get_settings


def _request(method: str, path: str, caller: Optional[str] = None, **kwargs):
    settings = get_settings()
    headers = {settings.caller_header: caller} if caller else {}
    r = requests.request(
        method,
        f"{settings.server_url}{path}",
        headers=headers,
        timeout=settings.request_timeout,
        **kwargs,
    )
    try:
        body = r.json()
    except ValueError:
        body = r.text
    print(r.status_code, body)
    return r


def init(caller: str):
    return _request("POST", "/init", caller)


def create(caller: str, description: str):
    return _request("POST", "/proposals", caller, json={"description": description})


def vote(caller: str, proposal_id: int):
    return _request("POST", f"/proposals/{proposal_id}/vote", caller)


def get(proposal_id: int):
    return _request("GET", f"/proposals/{proposal_id}")


def count():
    return _request("GET", "/proposals/count")


def events():
    return _request("GET", "/events")


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--caller", help="identity sent with the request")
    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("init")
    c = sub.add_parser("create")
    c.add_argument("--description", required=True)
    v = sub.add_parser("vote")
    v.add_argument("--id", type=int, required=True)
    g = sub.add_parser("get")
    g.add_argument("--id", type=int, required=True)
    sub.add_parser("count")
    sub.add_parser("events")
    args = p.parse_args()
    if args.cmd in ("init", "create", "vote") and not args.caller:
        p.error(f"{args.cmd} needs --caller")
    if args.cmd == "init":
        init(args.caller)
    elif args.cmd == "create":
        create(args.caller, args.description)
    elif args.cmd == "vote":
        vote(args.caller, args.id)
    elif args.cmd == "get":
        get(args.id)
    elif args.cmd == "count":
        count()
    elif args.cmd == "events":
        events()
    else:
        p.print_help()


if __name__ == "__main__":
    main()
