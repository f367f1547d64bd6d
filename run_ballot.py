"""Reference runner that walks through a small ballot in-process.

Run this script from the repository root (with the package installed) to see
proposals created, votes cast, a double vote and an unknown proposal refused,
and the notifications that were published along the way.
"""

from ballot_box import AlreadyVoted, ProposalDoesNotExist, RecordingEmitter, VotingSystem


def _print_heading(msg: str):
    print()
    print(msg)


def _print_kv(key: str, value):
    print(f"  {key}: {value}")


def main():
    owner, v1, v2 = "owner", "voter-1", "voter-2"
    recorder = RecordingEmitter()

    _print_heading("[Setup] owner initializes the ballot box")
    box = VotingSystem(owner, emitter=recorder)
    _print_kv("owner", box.owner)
    _print_kv("total_proposals", box.total_proposals())

    _print_heading("[Create] owner adds two proposals")
    for description in ("A", "B"):
        _print_kv(f"create {description!r}", box.create_proposal(owner, description))
    _print_kv("total_proposals", box.total_proposals())

    _print_heading("[Vote] two voters back proposal 0")
    for voter in (v1, v2):
        box.vote(voter, 0)
        _print_kv("voted", voter)
    _print_kv("proposal 0", box.get_proposal(0))

    _print_heading("[Refusals]")
    try:
        box.vote(v1, 0)
    except AlreadyVoted as e:
        _print_kv("second vote", e.code)
    try:
        box.vote(v1, 5)
    except ProposalDoesNotExist as e:
        _print_kv("vote on 5", e.code)
    _print_kv("proposal 0", box.get_proposal(0))

    print("\nNotifications:")
    for event in recorder.events:
        print("  ", event.to_dict())


if __name__ == "__main__":
    main()
