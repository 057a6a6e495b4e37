from gestor_horarios.utils.date_helper import parse_date


def parse_date_list(text: str) -> list:
    """
    '2025-03-10, 2025-03-12' -> [date(2025,3,10), date(2025,3,12)]
    Rango con '..': '2025-03-10..2025-03-12' -> tres días
    Cadena vacía -> []
    Fechas inválidas -> ValidationError
    """
    if not text.strip():
        return []
    seen = set()
    out = []
    for tok in text.split(","):
        tok = tok.strip()
        if not tok:
            continue
        if ".." in tok:
            first, last = (parse_date(p) for p in tok.split("..", 1))
            days = [first.fromordinal(n) for n in range(first.toordinal(), last.toordinal() + 1)]
        else:
            days = [parse_date(tok)]
        for d in days:
            if d not in seen:
                seen.add(d)
                out.append(d)
    return out
