"""Parsing of `git status --porcelain=v2 --branch` output."""

from vcs_prompt.core.git.abc import GitInfo

_INITIAL_OID = "(initial)"
_DETACHED_HEAD = "(detached)"


def parse_porcelain_v2(output: str, id_length: int) -> GitInfo:
    """Parse porcelain v2 status into a GitInfo.

    Ordinary (`1`) and rename/copy (`2`) entries carry a two-character XY
    field: X is the index column, Y the worktree column, `.` meaning
    unchanged. Unmerged entries (`u`) are conflicts, `?` entries untracked.

    Args:
        output: Raw stdout of git status
        id_length: Number of characters of the head commit id to keep

    Returns:
        GitInfo with the counted entries
    """
    branch: str | None = None
    head = ""
    ahead = behind = 0
    staged = modified = untracked = deleted = conflicted = 0

    for line in output.splitlines():
        if line.startswith("# branch.oid "):
            oid = line[len("# branch.oid ") :].strip()
            head = "" if oid == _INITIAL_OID else oid[:id_length]
        elif line.startswith("# branch.head "):
            name = line[len("# branch.head ") :].strip()
            branch = None if name == _DETACHED_HEAD else name
        elif line.startswith("# branch.ab "):
            for part in line[len("# branch.ab ") :].split():
                if part.startswith("+"):
                    ahead = int(part[1:])
                elif part.startswith("-"):
                    behind = int(part[1:])
        elif line.startswith(("1 ", "2 ")):
            xy = line[2:4]
            if xy[0] != ".":
                staged += 1
            if xy[1] in "MT":
                modified += 1
            if "D" in xy:
                deleted += 1
        elif line.startswith("u "):
            conflicted += 1
        elif line.startswith("? "):
            untracked += 1

    return GitInfo(
        branch=branch,
        head_short=head,
        staged=staged,
        modified=modified,
        untracked=untracked,
        deleted=deleted,
        conflicted=conflicted,
        ahead=ahead,
        behind=behind,
    )
