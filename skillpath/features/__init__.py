from .career_classifier import determine_career, select_rule_tag
from .career_rules import CareerRule, RuleTable, load_rule_table
from .summary_composer import compose_summary

__all__ = [
    "CareerRule",
    "RuleTable",
    "load_rule_table",
    "determine_career",
    "select_rule_tag",
    "compose_summary",
]
