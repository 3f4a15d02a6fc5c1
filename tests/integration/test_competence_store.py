from __future__ import annotations


def test_list_competences_inner_joins_translations(seeded_dao):
    competences = seeded_dao.list_competences()

    # competence 4 has no translations and is left out
    assert [c["competence_id"] for c in competences] == [1, 2, 3]
    assert competences[0]["translations"] == [
        {"language": "en", "name": "ticket sales"},
        {"language": "sv", "name": "biljettförsäljning"},
    ]


def test_list_competences_language_filter(seeded_dao):
    competences = seeded_dao.list_competences(language="sv")

    assert [c["competence_id"] for c in competences] == [1, 2, 3]
    assert all(len(c["translations"]) == 1 for c in competences)
    assert competences[1]["translations"] == [{"language": "sv", "name": "lotterier"}]


def test_list_competences_empty_database(dao):
    assert dao.list_competences() == []
