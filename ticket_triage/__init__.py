"""Keyword-based ticket triage: category, priority and extractive summary."""

from .engine import AnalysisResult, InvalidTicketInput, analyze_ticket, classify_ticket, describe_lexicons, summarize_ticket
from .pipeline import TicketTriageSession, triage_tickets

__all__ = [
    "AnalysisResult",
    "InvalidTicketInput",
    "TicketTriageSession",
    "analyze_ticket",
    "classify_ticket",
    "describe_lexicons",
    "summarize_ticket",
    "triage_tickets",
]
