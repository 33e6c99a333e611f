from codescore.models import Finding, Severity


def make_finding(severity: Severity, weight: float = 1.0, rule_name: str = "test_rule", line: int = 1) -> Finding:
    return Finding(
        rule_name=rule_name,
        severity=severity,
        message=f"{severity.value} finding",
        line=line,
        column=1,
        text="x",
        suggestion=None,
        score_impact=severity.base_score_impact * weight,
    )


def source_of_lines(count: int) -> str:
    return "".join(f"line {i}\n" for i in range(count))


def by_rule(findings, rule_name):
    return [f for f in findings if f.rule_name == rule_name]


def find_all(node, type_name):
    """Every node of the given kind in the subtree, in document order"""
    found = [node] if node.type == type_name else []
    for child in node.children:
        found.extend(find_all(child, type_name))
    return found
