"""Next-Gen WAF resources.

Rules, lists and signals live in a workspace or at the account level (see
`core.domain.scope.Scope`); thresholds and redactions are workspace-only.
"""

from adapters.ngwaf import lists, redactions, rules, signals, thresholds, workspaces

__all__ = ["lists", "redactions", "rules", "signals", "thresholds", "workspaces"]
