# subjects/curriculum.py

PRIMARY_SUBJECTS = [
    "اللغة العربية", "الرياضيات", "اللغة الإنجليزية", "التربية الإسلامية",
    "التربية التقنية", "التربية الفنية", "التربية الوطنية",
]

MIDDLE_SUBJECTS = PRIMARY_SUBJECTS + [
    "الجغرافيا", "التاريخ", "العلوم", "تكنولوجيا المعلومات والاتصالات",
]

# Secondary, final year
SCIENTIFIC_CORE = [
    "اللغة العربية", "التربية الإسلامية", "اللغة الإنجليزية",
    "الرياضيات المتخصصة", "الفيزياء", "الكيمياء",
]
SCIENTIFIC_ELECTIVES = ["الأحياء", "العلوم الهندسية", "الحاسوب"]

LITERARY_CORE = [
    "اللغة العربية", "التربية الإسلامية", "اللغة الإنجليزية",
    "الرياضيات الأساسية", "الجغرافيا", "التاريخ",
]
LITERARY_ELECTIVES = [
    "الدراسات الإسلامية", "العلوم العسكرية", "الأدب الإنجليزي", "اللغة العربية المتقدمة",
]


def core_subjects(level: str, stream: str | None = None) -> list[str]:
    if level == "PRIMARY":
        return list(PRIMARY_SUBJECTS)
    if level == "MIDDLE":
        return list(MIDDLE_SUBJECTS)
    if stream == "LITERARY":
        return list(LITERARY_CORE)
    return list(SCIENTIFIC_CORE)


def electives(level: str, stream: str | None = None) -> list[str]:
    """
    Electives exist only at SECONDARY; lower levels get an empty list.
    """
    if level != "SECONDARY":
        return []
    if stream == "LITERARY":
        return list(LITERARY_ELECTIVES)
    return list(SCIENTIFIC_ELECTIVES)
