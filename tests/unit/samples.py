"""Sample outline documents shared by the tests."""

# 1 A
#   2 A1
#   2 A2
#     3 A2a
# 1 B
#   2 B1
SAMPLE_OUTLINE = {
    "title": "Zettelkasten",
    "headings": [
        {
            "title": "A",
            "body": "Notes on A",
            "children": [
                {"title": "A1", "body": "First follow-up"},
                {
                    "title": "A2",
                    "body": "Second follow-up",
                    "children": [{"title": "A2a", "body": "Branch off A2"}],
                },
            ],
        },
        {
            "title": "B",
            "children": [{"title": "B1", "body": "Only child of B"}],
        },
    ],
}
