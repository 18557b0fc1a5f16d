"""Small labelled review corpus used to fit the bundled sentiment model."""

POSITIVE = "positive"
NEGATIVE = "negative"

REVIEWS: list[tuple[str, str]] = [
    ("This movie was fantastic!", POSITIVE),
    ("A fantastic film with a fantastic cast.", POSITIVE),
    ("This movie was great, I loved every minute.", POSITIVE),
    ("Absolutely wonderful, a fantastic experience.", POSITIVE),
    ("This movie was amazing and the acting was superb.", POSITIVE),
    ("Brilliant story, brilliant direction, I loved it.", POSITIVE),
    ("One of the best films I have seen this year.", POSITIVE),
    ("This film was excellent and deeply moving.", POSITIVE),
    ("The plot was fantastic and the ending was perfect.", POSITIVE),
    ("I really enjoyed this movie, it was delightful.", POSITIVE),
    ("Great performances and a beautiful soundtrack.", POSITIVE),
    ("This movie was fun, charming and fantastic.", POSITIVE),
    ("A masterpiece, highly recommended.", POSITIVE),
    ("Loved the characters, the movie was wonderful.", POSITIVE),
    ("Outstanding film, the best of the series.", POSITIVE),
    ("This movie was a joy to watch, fantastic work.", POSITIVE),
    ("Superb acting and a great script.", POSITIVE),
    ("An excellent, heartwarming and fantastic movie.", POSITIVE),
    ("I would happily watch this great movie again.", POSITIVE),
    ("The visuals were stunning and the story was great.", POSITIVE),
    ("This movie was terrible!", NEGATIVE),
    ("A terrible film with a terrible cast.", NEGATIVE),
    ("This movie was awful, I hated every minute.", NEGATIVE),
    ("Absolutely horrible, a terrible experience.", NEGATIVE),
    ("This movie was boring and the acting was bad.", NEGATIVE),
    ("Dreadful story, dull direction, I hated it.", NEGATIVE),
    ("One of the worst films I have seen this year.", NEGATIVE),
    ("This film was poor and painfully slow.", NEGATIVE),
    ("The plot was terrible and the ending was awful.", NEGATIVE),
    ("I really disliked this movie, it was a waste of time.", NEGATIVE),
    ("Bad performances and an annoying soundtrack.", NEGATIVE),
    ("This movie was dull, messy and terrible.", NEGATIVE),
    ("A disaster, not recommended at all.", NEGATIVE),
    ("Hated the characters, the movie was awful.", NEGATIVE),
    ("Disappointing film, the worst of the series.", NEGATIVE),
    ("This movie was a chore to watch, terrible work.", NEGATIVE),
    ("Wooden acting and a bad script.", NEGATIVE),
    ("A boring, lifeless and terrible movie.", NEGATIVE),
    ("I would never watch this bad movie again.", NEGATIVE),
    ("The visuals were ugly and the story was awful.", NEGATIVE),
]
