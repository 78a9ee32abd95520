"""
NeuRazor Scoring Engine

Turns raw cognitive-game metrics into weighted competency scores and a final
0-100 score, with versioned scoring configurations and version comparison.
"""
