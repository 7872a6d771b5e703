"""Parsing of jj template output.

RealJj asks jj for tab-separated, newline-terminated records built from
templates defined here. The parse functions are pure so they can be tested
against captured output without a jj binary.
"""

from vcs_prompt.core.jj.abc import CommitId, RefTarget, RemoteBookmark, TagRef, WorkingCopyCommit

FIELD_SEP = "\t"
ID_SEP = ","

WORKING_COPY_TEMPLATE = (
    'commit_id ++ "\\t" ++ change_id ++ "\\t" ++ change_id.shortest().prefix()'
    ' ++ "\\t" ++ parents.map(|c| c.commit_id()).join(",")'
    ' ++ "\\t" ++ if(description.trim(), "0", "1")'
    ' ++ "\\t" ++ if(conflict, "1", "0")'
    ' ++ "\\t" ++ if(divergent, "1", "0") ++ "\\n"'
)

PARENTS_TEMPLATE = 'commit_id ++ "\\t" ++ parents.map(|c| c.commit_id()).join(",") ++ "\\n"'

REF_TEMPLATE = (
    'name ++ "\\t" ++ if(remote, remote) ++ "\\t"'
    ' ++ added_targets.map(|c| c.commit_id()).join(",") ++ "\\t"'
    ' ++ removed_targets.map(|c| c.commit_id()).join(",") ++ "\\n"'
)


def _split_ids(value: str) -> tuple[CommitId, ...]:
    return tuple(part for part in value.split(ID_SEP) if part)


def _flag(value: str) -> bool:
    return value.strip() == "1"


def parse_working_copy(output: str) -> WorkingCopyCommit:
    """Parse the single record produced by WORKING_COPY_TEMPLATE.

    Raises:
        ValueError: If the output does not hold exactly one well-formed record
    """
    lines = [line for line in output.splitlines() if line]
    if len(lines) != 1:
        raise ValueError(f"Expected one working-copy record, got {len(lines)}")

    fields = lines[0].split(FIELD_SEP)
    if len(fields) != 7:
        raise ValueError(f"Malformed working-copy record: {lines[0]!r}")

    commit_id, change_id, prefix, parents, empty_desc, conflict, divergent = fields
    return WorkingCopyCommit(
        commit_id=commit_id,
        change_id=change_id,
        change_id_prefix_len=len(prefix),
        parent_ids=_split_ids(parents),
        empty_description=_flag(empty_desc),
        has_conflict=_flag(conflict),
        is_divergent=_flag(divergent),
    )


def parse_parents(output: str) -> dict[CommitId, list[CommitId]]:
    """Parse PARENTS_TEMPLATE records into a commit -> parents mapping."""
    parents: dict[CommitId, list[CommitId]] = {}
    for line in output.splitlines():
        if not line:
            continue
        commit_id, _, parent_field = line.partition(FIELD_SEP)
        parents[commit_id] = list(_split_ids(parent_field))
    return parents


def _parse_ref_line(line: str) -> tuple[str, str, RefTarget]:
    fields = line.split(FIELD_SEP)
    if len(fields) != 4:
        raise ValueError(f"Malformed ref record: {line!r}")
    name, remote, added, removed = fields
    return name, remote, RefTarget(added=_split_ids(added), removed=_split_ids(removed))


def parse_bookmarks(output: str) -> tuple[dict[str, RefTarget], list[RemoteBookmark]]:
    """Parse `jj bookmark list --all-remotes` records.

    Records with an empty remote column are local bookmarks. Local bookmarks
    that were deleted but still have remote counterparts come back with an
    absent target and are dropped.

    Returns:
        Tuple of (local name -> target, remote bookmarks in listing order)
    """
    local: dict[str, RefTarget] = {}
    remote: list[RemoteBookmark] = []
    for line in output.splitlines():
        if not line:
            continue
        name, remote_name, target = _parse_ref_line(line)
        if remote_name:
            remote.append(RemoteBookmark(name=name, remote=remote_name, target=target))
        elif not target.is_absent:
            local[name] = target
    return local, remote


def parse_tags(output: str) -> list[TagRef]:
    """Parse `jj tag list` records."""
    tags: list[TagRef] = []
    for line in output.splitlines():
        if not line:
            continue
        name, _, target = _parse_ref_line(line)
        tags.append(TagRef(name=name, target=target))
    return tags
