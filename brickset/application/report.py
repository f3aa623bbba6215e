"""Text report over the LEGO set collection."""

from typing import Iterable, TextIO

from brickset.application.lego_set_service import PIECES_THRESHOLD, LegoSetService

DEFAULT_PREFIX = "lava"
DEFAULT_MAX_TAGS = 5


def _write_section(out: TextIO, header: str, lines: Iterable[object], first: bool = False):
    if not first:
        out.write("\n")
    out.write(f"{header}\n")
    for line in lines:
        out.write(f"{line}\n")


def write_report(
    service: LegoSetService,
    out: TextIO,
    prefix: str = DEFAULT_PREFIX,
    max_tags: int = DEFAULT_MAX_TAGS,
):
    """
    Write every report section to ``out``.

    Args:
        service: Query service over the loaded sets
        out: Text stream receiving the report
        prefix: Name prefix to search for
        max_tags: Maximum tag count for the tag filter
    """
    _write_section(
        out,
        f"Lego names starting with the String '{prefix}':",
        service.names_starting_with(prefix),
        first=True,
    )
    _write_section(
        out,
        "Lego names with the same character at the beginning and the end:",
        service.names_with_same_beginning_and_ending(),
    )
    _write_section(
        out,
        f"Lego numbers with at most {max_tags} tags:",
        service.numbers_with_at_most_tags(max_tags),
    )
    _write_section(
        out,
        "A summary of the packaging types of legos:",
        (f"{packaging}: {count}" for packaging, count in service.packaging_type_summary().items()),
    )

    total = service.sum_of_pieces()
    _write_section(out, "The sum of all lego pieces:", [] if total is None else [total])

    _write_section(
        out,
        f"Do all sets have at most {PIECES_THRESHOLD} pieces?",
        [service.all_sets_have_at_most_pieces()],
    )
    _write_section(
        out,
        "Sorted, distinct tags of legosets, that have no subtheme:",
        service.sorted_distinct_tags_without_subtheme(),
    )

    longest = service.theme_with_longest_name()
    _write_section(out, "The longest theme name:", [] if longest is None else [longest])

    _write_section(
        out,
        "Number of sets for each theme:",
        (f"{theme}: {count}" for theme, count in service.number_of_sets_by_theme().items()),
    )
    _write_section(
        out,
        "Each theme with their distinct subthemes:",
        (
            f"{theme}: {', '.join(sorted(subthemes))}".rstrip()
            for theme, subthemes in service.subthemes_by_theme().items()
        ),
    )
