"""Rename plan construction."""

from subrename.models.rename import RenameOp, RenamePlan, SubstitutionRule


def build_plan(names: list[str], rule: SubstitutionRule) -> RenamePlan:
    """Apply the substitution rule to each name and keep the ones that change.

    Args:
        names: Matched file names, in display order.
        rule: Substitution applied once per name.

    Returns:
        RenamePlan with one operation per changed name, in input order.

    Raises:
        ValueError: If the rule's search string is empty.
    """
    operations: list[RenameOp] = []
    for old_name in names:
        new_name = rule.apply(old_name)
        if new_name != old_name:
            operations.append(RenameOp(old_name=old_name, new_name=new_name))
    return RenamePlan(operations=operations)
