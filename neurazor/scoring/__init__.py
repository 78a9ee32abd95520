"""
scoring/ — NeuRazor Scoring Engine

Modules:
    utils.py             - Float utilities (clamp, ratio, exact_sum)
    competency.py        - Competency primitive (clamp + weight)
    aggregator.py        - Final score aggregation
    evaluators.py        - Per-game formula evaluators + dispatch
    defaults.py          - Built-in default configs and judge prompts
    weights.py           - Weight sanity warnings
    version_registry.py  - Saved scoring versions, single active marker
    config_store.py      - Current editable config per game kind
    comparison.py        - Weight diffs and score impact between sessions
    transformers.py      - Boundary adapters for stored session payloads
"""
