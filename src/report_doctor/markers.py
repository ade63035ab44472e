"""HTML comment markers that delimit auto-managed report sections.

Each marker sits alone on its own line. Marker text is matched literally,
never as a regex.
"""

MARKERS = {
    "SUMMARY_START": "<!-- AUTO-SUMMARY-START -->",
    "SUMMARY_END": "<!-- AUTO-SUMMARY-END -->",
    "IMPROVEMENT_LIST_START": "<!-- AUTO-IMPROVEMENT-LIST-START -->",
    "IMPROVEMENT_LIST_END": "<!-- AUTO-IMPROVEMENT-LIST-END -->",
    "FEATURE_LIST_START": "<!-- AUTO-FEATURE-LIST-START -->",
    "FEATURE_LIST_END": "<!-- AUTO-FEATURE-LIST-END -->",
    "OPTIMIZATION_START": "<!-- AUTO-OPTIMIZATION-START -->",
    "OPTIMIZATION_END": "<!-- AUTO-OPTIMIZATION-END -->",
    "SCORE_START": "<!-- AUTO-SCORE-START -->",
    "SCORE_END": "<!-- AUTO-SCORE-END -->",
    "OVERVIEW_START": "<!-- AUTO-OVERVIEW-START -->",
    "OVERVIEW_END": "<!-- AUTO-OVERVIEW-END -->",
    "TLDR_START": "<!-- AUTO-TLDR-START -->",
    "TLDR_END": "<!-- AUTO-TLDR-END -->",
    "RISK_SUMMARY_START": "<!-- AUTO-RISK-SUMMARY-START -->",
    "RISK_SUMMARY_END": "<!-- AUTO-RISK-SUMMARY-END -->",
    "SCORE_MAPPING_START": "<!-- AUTO-SCORE-MAPPING-START -->",
    "SCORE_MAPPING_END": "<!-- AUTO-SCORE-MAPPING-END -->",
    "TREND_START": "<!-- AUTO-TREND-START -->",
    "TREND_END": "<!-- AUTO-TREND-END -->",
    "ERROR_EXPLORATION_START": "<!-- AUTO-ERROR-EXPLORATION-START -->",
    "ERROR_EXPLORATION_END": "<!-- AUTO-ERROR-EXPLORATION-END -->",
    "STRUCTURE_START": "<!-- AUTO-STRUCTURE-START -->",
    "STRUCTURE_END": "<!-- AUTO-STRUCTURE-END -->",
    "DETAIL_START": "<!-- AUTO-DETAIL-START -->",
    "DETAIL_END": "<!-- AUTO-DETAIL-END -->",
}
