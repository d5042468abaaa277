"""EA Maturity Assessment engine.

Enterprise Architecture self-assessment core: turns questionnaire answers
into weighted maturity scores across a fixed 10-layer taxonomy, detects
capability gaps from specific answers, and ranks remediation recommendations.
"""

__version__ = "0.1.0"
