"""Translation support for the application."""

# Current language
_current_language = "en"

# Translation dictionaries
_translations = {
    "de": {
        # Validation and scoring
        "{student} should not sit next to {neighbour}": "{student} sollte nicht neben {neighbour} sitzen",
        "{count} seating conflict(s) detected": "{count} Sitzkonflikt(e) gefunden",
        "No seating conflicts detected": "Keine Sitzkonflikte gefunden",
        "{percent}% of neighbouring students have different skill levels": "{percent}% der Sitznachbarn haben unterschiedliche Leistungsniveaus",
        "{count} of {total} beginners sit in the front attention zone": "{count} von {total} Anfängern sitzen in der vorderen Aufmerksamkeitszone",
        "Only {count} of {total} beginners sit in the front attention zone": "Nur {count} von {total} Anfängern sitzen in der vorderen Aufmerksamkeitszone",

        # Layouts
        "Traditional Rows": "Klassische Reihen",
        "Stadium/V-Shape": "Stadion/V-Form",
        "Horseshoe (U-Shape)": "Hufeisen (U-Form)",
        "Double Horseshoe": "Doppeltes Hufeisen",
        "Circle/Roundtable": "Kreis/Runder Tisch",
        "Group Tables": "Gruppentische",
        "Paired Desks": "Partnertische",
        "Classic classroom setup with desks in straight lines facing forward. Maximizes teacher focus and minimizes student-to-student interaction.": "Klassische Aufstellung mit Tischen in geraden Reihen nach vorne. Maximiert den Fokus auf die Lehrkraft und minimiert Interaktion zwischen Schülern.",
        "Angled rows creating better sightlines to teacher and board. Slight improvement in community feeling over traditional rows.": "Schräge Reihen mit besserer Sicht auf Lehrkraft und Tafel. Etwas mehr Gemeinschaftsgefühl als klassische Reihen.",
        "Semi-circle arrangement facilitating whole-class discussions. All students can see teacher and each other.": "Halbkreis für Diskussionen mit der ganzen Klasse. Alle sehen die Lehrkraft und einander.",
        "Inner and outer horseshoe rings for larger classes. Allows discussion format while accommodating more students.": "Innerer und äußerer Hufeisenring für größere Klassen. Ermöglicht Diskussionen mit mehr Schülern.",
        "Complete circle creating democratic, non-hierarchical space. Ideal for advanced discussions and Socratic seminars.": "Geschlossener Kreis für einen gleichberechtigten Raum. Ideal für anspruchsvolle Diskussionen und sokratische Seminare.",
        "Clusters of 4 desks promoting collaboration. Excellent for group projects and peer learning activities.": "Vierertische zur Förderung der Zusammenarbeit. Hervorragend für Gruppenprojekte und gegenseitiges Lernen.",
        "Desks arranged in pairs throughout room. Balances collaboration with individual focus.": "Zweiertische im ganzen Raum. Verbindet Zusammenarbeit mit Einzelarbeit.",
        "Direct instruction, individual work, assessments": "Frontalunterricht, Einzelarbeit, Prüfungen",
        "Lectures with improved visibility": "Vorträge mit besserer Sicht",
        "Class discussions, Q&A sessions": "Klassendiskussionen, Fragerunden",
        "Large group discussions": "Diskussionen in großen Gruppen",
        "Socratic seminars, peer reviews": "Sokratische Seminare, Peer-Reviews",
        "Collaborative projects, group work": "Gemeinsame Projekte, Gruppenarbeit",
        "Peer learning, think-pair-share": "Lernen mit Partnern, Think-Pair-Share",

        # Strategies
        "Mixed Ability": "Gemischte Leistungsniveaus",
        "Skill Clustering": "Leistungsgruppen",
        "Language Support": "Sprachunterstützung",
        "Collaborative Pairs": "Kooperative Paare",
        "Attention Zone Focus": "Aufmerksamkeitszone",
        "Behavior Management": "Verhaltenssteuerung",
        "Random Assignment": "Zufällige Verteilung",
        "Strategic pairing of different skill levels to promote peer learning and support.": "Gezielte Kombination verschiedener Leistungsniveaus zur Förderung gegenseitigen Lernens.",
        "Groups students with similar skill levels together for targeted, differentiated instruction.": "Gruppiert Schüler mit ähnlichem Niveau für gezielten, differenzierten Unterricht.",
        "Places students who share languages together to provide mutual support and reduce language barriers.": "Setzt Schüler mit gemeinsamer Sprache zusammen, damit sie sich unterstützen und Sprachbarrieren abbauen.",
        "Positions students who work well together in close proximity based on their stated preferences.": "Setzt Schüler, die gut zusammenarbeiten, nach ihren Angaben nah beieinander.",
        "Places students who need more support in the front-center action zone.": "Setzt Schüler mit mehr Unterstützungsbedarf in die vordere Aktionszone.",
        "Separates students with avoidance constraints to minimize disruptions.": "Trennt Schüler mit Vermeidungswünschen, um Störungen zu verringern.",
        "Random assignment that can help break up social cliques and create new working relationships.": "Zufällige Verteilung, die Cliquen aufbricht und neue Arbeitsbeziehungen schafft.",
        "Research shows heterogeneous grouping benefits both high and low achievers through peer tutoring effects.": "Studien zeigen, dass heterogene Gruppen durch gegenseitiges Erklären starken und schwachen Schülern helfen.",
        "Allows for differentiated instruction and reduces achievement gaps within groups.": "Ermöglicht differenzierten Unterricht und verringert Leistungsunterschiede in Gruppen.",
        "Bilingual students show increased engagement when paired with same-language peers.": "Zweisprachige Schüler beteiligen sich mehr, wenn sie neben Schülern gleicher Sprache sitzen.",
        "Students who choose compatible partners show higher task completion rates.": "Schüler mit passenden Partnern erledigen mehr Aufgaben.",
        "The front-center action zone receives more teacher interactions, improving engagement.": "Die vordere Aktionszone erhält mehr Zuwendung der Lehrkraft, was die Beteiligung erhöht.",
        "Strategic separation reduces disruptive behavior compared to student choice.": "Gezielte Trennung verringert Störungen im Vergleich zur freien Platzwahl.",
        "Prevents social cliques and creates diverse interaction opportunities.": "Verhindert Cliquen und schafft vielfältige Begegnungen.",

        # Command line
        "Seating Chart": "Sitzplan",
        "Layout": "Sitzordnung",
        "Strategy": "Strategie",
        "Seat": "Platz",
        "empty": "frei",
        "Score": "Bewertung",
        "Violations": "Verstöße",
        "Insights": "Hinweise",
        "Saved chart to:": "Sitzplan gespeichert unter:",
        "Import failed:": "Import fehlgeschlagen:",
        "Invalid seed:": "Ungültiger Startwert:",
        "Usage:": "Verwendung:",
    }
}


def set_language(lang: str):
    """Set the current language."""
    global _current_language
    _current_language = lang


def get_language() -> str:
    """Get the current language."""
    return _current_language


def tr(text: str) -> str:
    """Translate a string to the current language."""
    if _current_language == "en":
        return text

    translations = _translations.get(_current_language, {})
    return translations.get(text, text)


def available_languages() -> list[tuple[str, str]]:
    """Get list of available languages as (code, name) tuples."""
    return [
        ("en", "English"),
        ("de", "Deutsch"),
    ]
