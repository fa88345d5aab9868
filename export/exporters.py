"""
Exporters - CSV and JSON renderings of ScoredNiche lists.

Column names and JSON keys use the camelCase field names of the data source
so exported files line up with the raw scan payload.
"""
import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from core.scorer.models import ScoredNiche

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    'niche', 'score', 'averagePrice', 'demand', 'competition', 'trend', 'targetAudience', 'battlePlan'
]
FLAT_CSV_COLUMNS = CSV_COLUMNS + [
    'description', 'gigTitles', 'keywords', 'faqs', 'marketingChannels', 'painPoints'
]

TITLE_DELIMITER = " | "
KEYWORD_DELIMITER = ", "
FAQ_DELIMITER = " || "


def to_records(data: Sequence[ScoredNiche]) -> List[Dict[str, Any]]:
    """ScoredNiche list as camelCase dicts, nested lists kept as lists."""
    records = []
    for scored in data:
        n = scored.niche
        records.append({
            'niche': n.name,
            'description': n.description,
            'averagePrice': n.average_price,
            'demand': n.demand,
            'competition': n.competition,
            'trend': n.trend,
            'scalabilityIndex': n.scalability_index,
            'aiRisk': n.ai_risk,
            'gigTitles': list(n.gig_titles),
            'gigDescription': n.gig_description,
            'keywords': list(n.keywords),
            'faqs': [{'question': f.question, 'answer': f.answer} for f in n.faqs],
            'battlePlan': n.battle_plan,
            'competitorWeakness': n.competitor_weakness,
            'competitionNote': n.competition_note,
            'targetAudience': n.target_audience,
            'strategicForecast': n.strategic_forecast,
            'marketingChannels': list(n.marketing_channels),
            'painPoints': list(n.pain_points),
            'score': scored.score,
            'breakdown': scored.breakdown.to_dict(),
        })
    return records


def _flatten(record: Dict[str, Any]) -> Dict[str, Any]:
    flat = dict(record)
    flat['gigTitles'] = TITLE_DELIMITER.join(record['gigTitles'])
    flat['keywords'] = KEYWORD_DELIMITER.join(record['keywords'])
    flat['faqs'] = FAQ_DELIMITER.join(
        f"Q: {f['question']} A: {f['answer']}" for f in record['faqs']
    )
    flat['marketingChannels'] = KEYWORD_DELIMITER.join(record['marketingChannels'])
    flat['painPoints'] = TITLE_DELIMITER.join(record['painPoints'])
    return flat


def format_number(value: Any) -> str:
    """Whole floats lose their trailing .0 (450.0 -> "450"); everything else is str()."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _write_csv(rows: List[Dict[str, Any]], columns: List[str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(columns)
    for row in rows:
        writer.writerow([format_number(row[c]) for c in columns])
    return buffer.getvalue().rstrip("\n")


def to_csv(data: Sequence[ScoredNiche]) -> Optional[str]:
    """
    Summary CSV: header row unquoted, every value double-quoted.

    Returns:
        CSV text, or None when there is nothing to export
    """
    if not data:
        return None
    header = ",".join(CSV_COLUMNS)
    body = _write_csv(to_records(data), CSV_COLUMNS).split("\n", 1)[1]
    return f"{header}\n{body}"


def to_flat_csv(data: Sequence[ScoredNiche]) -> Optional[str]:
    """
    Full CSV with list fields flattened into delimiter-joined strings:
    gig titles and pain points with " | ", keywords and marketing channels
    with ", ", FAQs as "Q: ... A: ..." joined with " || ".
    """
    if not data:
        return None
    rows = [_flatten(r) for r in to_records(data)]
    header = ",".join(FLAT_CSV_COLUMNS)
    body = _write_csv(rows, FLAT_CSV_COLUMNS).split("\n", 1)[1]
    return f"{header}\n{body}"


def to_json(data: Sequence[ScoredNiche]) -> Optional[str]:
    if not data:
        return None
    return json.dumps(to_records(data), indent=2)


def write_export(content: Optional[str], path: str) -> bool:
    """Write rendered export content to path. Returns False when there was nothing to write."""
    if content is None:
        logger.warning(f"Nothing to export to {path}")
        return False
    Path(path).write_text(content, encoding='utf-8')
    logger.info(f"Exported to {path}")
    return True
