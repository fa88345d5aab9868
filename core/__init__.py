"""NicheScout core: normalization, scoring, presets, insights and the AI data source."""
