"""Default keyword lists used to classify author affiliations."""

ACADEMIC_KEYWORDS = (
    "university", "college", "hospital", "clinic", "institute", "school", "center",
    "centre", "medical center", "faculty", "department", "division", "laboratory of",
    "academy", "association", "foundation", "national", "federal", "health service",
)

COMMERCIAL_KEYWORDS = (
    "pharma", "biotech", "therapeutics", "inc", "llc", "ltd", "corp", "corporation",
    "company", "laboratories", "gmbh", "ag", "plc", "co.", "biopharma", "biosciences",
    "pharmaceutical", "pharmaceuticals", "diagnostics", "technologies", "oncology",
)
