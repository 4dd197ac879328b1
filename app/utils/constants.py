"""Common constants."""

DEFAULT_STIPEND = "Unpaid"

# Populated field subsets
USER_BRIEF_FIELDS = ["name", "email"]
INTERNSHIP_BRIEF_FIELDS = ["title", "company"]
INTERNSHIP_SUMMARY_FIELDS = ["title", "company", "country", "duration", "stipend"]
