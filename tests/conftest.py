from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def raw_ticket_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Incident ID": ["INC001", "INC002", "INC003", "INC004", "INC005"],
            "Subject": [
                "App crash on save",
                "Add dark mode",
                "How do I export reports?",
                "Typo on homepage",
                "Minor cosmetic glitch",
            ],
            "Details": [
                "The editor shows an error and crashes when saving. This is urgent for production.",
                "Please add a dark mode option to the settings page.",
                "Where can I find the export guide.",
                None,
                "The footer color is slightly wrong. Nice to have a fix eventually.",
            ],
        }
    )


@pytest.fixture
def long_description() -> str:
    return (
        "The dashboard takes a long time to load every morning. "
        "We see an error in the browser console. "
        "Thanks for looking into it."
    )
