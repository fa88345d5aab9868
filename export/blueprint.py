"""
Blueprint Builder - Markdown execution plan for a single ranked niche.
"""
import re
from typing import List

from core.insights import pricing_tiers
from core.scorer.models import ScoredNiche
from export.exporters import format_number


def blueprint_filename(name: str) -> str:
    """'AI Voice Agents' -> 'ai_voice_agents_blueprint.md'"""
    slug = re.sub(r"\s+", "_", name.lower())
    return f"{slug}_blueprint.md"


def to_blueprint_markdown(scored: ScoredNiche) -> str:
    n = scored.niche
    tiers = pricing_tiers(n.average_price)

    lines: List[str] = [
        f"# EXECUTION BLUEPRINT: {n.name}",
        "",
        "## 1. MARKET OPPORTUNITY OVERVIEW",
        f"- **Intelligence Score:** {scored.score}/100",
        f"- **Market Dynamics:** Demand ({n.demand}/10) | Friction ({n.competition}/10) | "
        f"Growth Momentum ({n.trend:.2f})",
        f"- **Scalability Index:** {n.scalability_index}/10",
        f"- **AI Disruption Risk:** {n.ai_risk}/10",
        f"- **Target Persona:** {n.target_audience}",
        f"- **Value Proposition:** {n.description}",
        "",
        "## 2. THE COMPETITIVE BATTLE PLAN",
        f"- **The Gap (Competitor Weakness):** {n.competitor_weakness}",
        f"- **Tactical Disruption:** {n.battle_plan}",
        f"- **Future Strategy Forecast:** {n.strategic_forecast}",
        "",
        "## 3. FINANCIAL PROJECTIONS",
        f"- **Strategic Entry Price:** ${format_number(n.average_price)}",
        "- **Value Tiers:**",
        f"  - Basic (Entry): ${tiers.basic}",
        f"  - Standard (Scale): ${format_number(tiers.standard)}",
        f"  - Premium (Authority): ${tiers.premium}",
        "",
        "## 4. HIGH-CONVERSION GIG ASSETS",
        "### Psychological Hook Titles:",
    ]
    lines.extend(f"- [HOOK] {title}" for title in n.gig_titles)
    lines.extend([
        "",
        "### Semantic Search Tags:",
        ", ".join(n.keywords),
        "",
        "## 5. OBJECTION-SLAYER FAQS",
    ])
    lines.append("\n\n".join(f"### Q: {f.question}\n**RESPONSE:** {f.answer}" for f in n.faqs))
    lines.extend([
        "",
        "---",
        "**CONFIDENTIAL STRATEGY DOCUMENT**",
    ])
    return "\n".join(lines)
