"""Human-readable information about layouts and strategies."""

from collections import Counter

from .models import LayoutKind, SkillLevel, Student, StrategyKind
from .translations import tr

_LAYOUT_NAMES = {
    LayoutKind.TRADITIONAL_ROWS: "Traditional Rows",
    LayoutKind.STADIUM: "Stadium/V-Shape",
    LayoutKind.HORSESHOE: "Horseshoe (U-Shape)",
    LayoutKind.DOUBLE_HORSESHOE: "Double Horseshoe",
    LayoutKind.CIRCLE: "Circle/Roundtable",
    LayoutKind.GROUPS: "Group Tables",
    LayoutKind.PAIRS: "Paired Desks",
}

_LAYOUT_DESCRIPTIONS = {
    LayoutKind.TRADITIONAL_ROWS: "Classic classroom setup with desks in straight lines facing forward. Maximizes teacher focus and minimizes student-to-student interaction.",
    LayoutKind.STADIUM: "Angled rows creating better sightlines to teacher and board. Slight improvement in community feeling over traditional rows.",
    LayoutKind.HORSESHOE: "Semi-circle arrangement facilitating whole-class discussions. All students can see teacher and each other.",
    LayoutKind.DOUBLE_HORSESHOE: "Inner and outer horseshoe rings for larger classes. Allows discussion format while accommodating more students.",
    LayoutKind.CIRCLE: "Complete circle creating democratic, non-hierarchical space. Ideal for advanced discussions and Socratic seminars.",
    LayoutKind.GROUPS: "Clusters of 4 desks promoting collaboration. Excellent for group projects and peer learning activities.",
    LayoutKind.PAIRS: "Desks arranged in pairs throughout room. Balances collaboration with individual focus.",
}

_LAYOUT_PURPOSES = {
    LayoutKind.TRADITIONAL_ROWS: "Direct instruction, individual work, assessments",
    LayoutKind.STADIUM: "Lectures with improved visibility",
    LayoutKind.HORSESHOE: "Class discussions, Q&A sessions",
    LayoutKind.DOUBLE_HORSESHOE: "Large group discussions",
    LayoutKind.CIRCLE: "Socratic seminars, peer reviews",
    LayoutKind.GROUPS: "Collaborative projects, group work",
    LayoutKind.PAIRS: "Peer learning, think-pair-share",
}

_STRATEGY_NAMES = {
    StrategyKind.MIXED_ABILITY: "Mixed Ability",
    StrategyKind.SKILL_CLUSTERING: "Skill Clustering",
    StrategyKind.LANGUAGE_SUPPORT: "Language Support",
    StrategyKind.COLLABORATIVE_PAIRS: "Collaborative Pairs",
    StrategyKind.ATTENTION_ZONE: "Attention Zone Focus",
    StrategyKind.BEHAVIOR_MANAGEMENT: "Behavior Management",
    StrategyKind.RANDOM: "Random Assignment",
}

_STRATEGY_DESCRIPTIONS = {
    StrategyKind.MIXED_ABILITY: "Strategic pairing of different skill levels to promote peer learning and support.",
    StrategyKind.SKILL_CLUSTERING: "Groups students with similar skill levels together for targeted, differentiated instruction.",
    StrategyKind.LANGUAGE_SUPPORT: "Places students who share languages together to provide mutual support and reduce language barriers.",
    StrategyKind.COLLABORATIVE_PAIRS: "Positions students who work well together in close proximity based on their stated preferences.",
    StrategyKind.ATTENTION_ZONE: "Places students who need more support in the front-center action zone.",
    StrategyKind.BEHAVIOR_MANAGEMENT: "Separates students with avoidance constraints to minimize disruptions.",
    StrategyKind.RANDOM: "Random assignment that can help break up social cliques and create new working relationships.",
}

_STRATEGY_RESEARCH = {
    StrategyKind.MIXED_ABILITY: "Research shows heterogeneous grouping benefits both high and low achievers through peer tutoring effects.",
    StrategyKind.SKILL_CLUSTERING: "Allows for differentiated instruction and reduces achievement gaps within groups.",
    StrategyKind.LANGUAGE_SUPPORT: "Bilingual students show increased engagement when paired with same-language peers.",
    StrategyKind.COLLABORATIVE_PAIRS: "Students who choose compatible partners show higher task completion rates.",
    StrategyKind.ATTENTION_ZONE: "The front-center action zone receives more teacher interactions, improving engagement.",
    StrategyKind.BEHAVIOR_MANAGEMENT: "Strategic separation reduces disruptive behavior compared to student choice.",
    StrategyKind.RANDOM: "Prevents social cliques and creates diverse interaction opportunities.",
}


def layout_name(layout: "str | LayoutKind") -> str:
    return tr(_LAYOUT_NAMES[LayoutKind.parse(layout)])


def layout_description(layout: "str | LayoutKind") -> str:
    return tr(_LAYOUT_DESCRIPTIONS[LayoutKind.parse(layout)])


def layout_purpose(layout: "str | LayoutKind") -> str:
    return tr(_LAYOUT_PURPOSES[LayoutKind.parse(layout)])


def strategy_name(strategy: "str | StrategyKind") -> str:
    return tr(_STRATEGY_NAMES[StrategyKind.parse(strategy)])


def strategy_description(strategy: "str | StrategyKind") -> str:
    return tr(_STRATEGY_DESCRIPTIONS[StrategyKind.parse(strategy)])


def strategy_research(strategy: "str | StrategyKind") -> str:
    return tr(_STRATEGY_RESEARCH[StrategyKind.parse(strategy)])


def roster_summary(students: list[Student]) -> dict:
    """Counts shown next to the roster: languages, constraints, skill levels."""
    languages = {lang for s in students for lang in s.languages if lang}
    constraints = sum(len(s.works_well_with) + len(s.avoid_pairing) for s in students)
    skills = Counter(s.skill_level for s in students)
    return {
        "students": len(students),
        "languages": len(languages),
        "constraints": constraints,
        "skill_levels": {level.value: skills.get(level, 0) for level in SkillLevel},
    }
