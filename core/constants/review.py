"""Review generation and reminder constants."""

# Marker each review template carries exactly once
DESCRIPTORS_PLACEHOLDER = "{descriptors}"

# Joiner between the last two phrases ("A, B und C")
FINAL_CONJUNCTION = " und "
PHRASE_SEPARATOR = ", "

REVIEW_TEMPLATES = [
    "Ich hatte eine wunderbare Erfahrung: {descriptors}. "
    "Ich kann das Unternehmen ohne Zögern weiterempfehlen.",
    "Wirklich beeindruckt von meinem Besuch: {descriptors}. "
    "Ich freue mich schon auf meinen nächsten Termin.",
    "{descriptors}. Insgesamt eine fantastische Erfahrung, "
    "die ich jedem empfehlen würde.",
    "Aus eigener Erfahrung kann ich sagen: {descriptors}. "
    "Fünf Sterne, absolut verdient.",
]

MIN_DESCRIPTORS_FOR_REVIEW = 2
MAX_DESCRIPTORS_PER_REVIEW = 6

GOOGLE_WRITE_REVIEW_URL = "https://search.google.com/local/writereview?placeid={place_id}"

# Delay used by the zero-interval test schedule
INSTANT_TEST_DELAY_SECONDS = 10

# Longest interval a subscriber can choose
MAX_NOTIFICATION_INTERVAL_DAYS = 365

# Share of the interval used as the +/- jitter range
INTERVAL_VARIANCE_RATIO = 0.33

# Probability that a weekend date stays on the weekend
WEEKEND_KEEP_PROBABILITY = 0.2

# Inclusive hour bands per preferred time slot: (first hour, number of hours)
TIME_SLOT_HOURS = {
    "morning": (8, 4),
    "afternoon": (12, 5),
    "evening": (17, 4),
}
DEFAULT_HOURS = (9, 10)
