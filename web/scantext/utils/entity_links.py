"""
Utility functions for auto-linking sibling entity names in rendered text.

Matching runs against the plain (unformatted) text. Links are then inserted
into the HTML fragment the text format produced from that text, so the markup
the format added is left alone.

Strategy:
1. Collect candidate names, plus a lowercase-initial variant for plain single
   words ("Meeting" also finds "meeting")
2. Scan the plain text once for whole-word occurrences
3. Reduce to distinct matched strings and resolve each to a candidate id
4. Link the first whitespace-prefixed occurrence of each string in the fragment
"""
import re
from collections import namedtuple

from loguru import logger
from markupsafe import Markup, escape

from ..exceptions import LinkBuildError

Candidate = namedtuple('Candidate', ['id', 'name'])

# A matched substring of the plain text and the candidate it resolved to
Match = namedtuple('Match', ['text', 'start', 'end', 'candidate_id'])

# Leading capitals, then punctuation, then digits: "WTO", "PFC" of "PFCs", "UN-" of "UN-Habitat"
_LEADING_RUN = re.compile(r'([A-Z]*)(\W*)(\d*)')
_NON_WORD = re.compile(r'\W')
_WORD_CHAR = re.compile(r'\w')
_ANCHOR_OPEN = re.compile(r'<a[\s>]', re.IGNORECASE)
_ANCHOR_CLOSE = re.compile(r'</a\s*>', re.IGNORECASE)

# Lookarounds used when scanning; same rule as is_whole_word()
WORD_START = r'(?<!\w)'
WORD_END = r'(?!\w)'


def is_word_char(char):
    return bool(_WORD_CHAR.match(char))


def is_whole_word(text, start, end):
    """Check that text[start:end] is not glued to a word character on either side.

    String edges count as non-word, so "Meeting" is whole in "Meeting." but
    not in "Meetings".
    """
    if start > 0 and is_word_char(text[start - 1]):
        return False
    if end < len(text) and is_word_char(text[end]):
        return False
    return True


def lowercase_initial(name):
    return name[:1].lower() + name[1:]


def uppercase_initial(name):
    return name[:1].upper() + name[1:]


def allows_lowercase_match(name):
    """
    Check if a name may also be found with its first character lowercase.

    For example "Meeting" also matches "meeting". Excluded:
    - abbreviations like "Add." or "Corr." and names under 4 characters
    - names in more words (e.g. "Global Biodiversity Forum")
    - acronyms like "WTO" or "PFCs"
    - names with special characters (e.g. "UN-Habitat")

    Args:
        name: Candidate name, or a matched string with its initial restored

    Returns:
        True if the lowercase-initial form refers to the same entity
    """
    if len(name) < 4 or name.endswith('.'):
        return False

    if len(name.split()) != 1:
        return False

    leading = _LEADING_RUN.match(name)
    if len(name) - len(leading.group(0)) < 2:
        return False

    if leading.group(2) or _NON_WORD.search(name):
        return False

    return True


def escape_name(name):
    """Quote every pattern character in a name so it matches literally."""
    return re.escape(name)


def search_names(candidates):
    """
    Build the list of strings to search for.

    Args:
        candidates: Mapping of id -> name (or iterable of (id, name) pairs)

    Returns:
        Candidate names in candidate order followed by the lowercase-initial
        variants of the names that allow it, without duplicates
    """
    names = [name for name in dict(candidates).values() if name and name.strip()]
    variants = [lowercase_initial(name) for name in names if allows_lowercase_match(name)]
    return list(dict.fromkeys(names + variants))


def build_pattern(names):
    """
    Compile one alternation over all names, bound to whole words.

    Longest names go first so "Climate Council" is not cut short by "Climate".

    Returns:
        Compiled pattern, or None when there is nothing to search for
    """
    if not names:
        return None

    alternatives = sorted(names, key=len, reverse=True)
    return re.compile(WORD_START + '(?:' + '|'.join(escape_name(name) for name in alternatives) + ')' + WORD_END)


def find_matches(plain_text, candidates):
    """
    Scan plain text once for whole-word occurrences of candidate names.

    Returns:
        List of unresolved Match tuples in text order, non-overlapping
    """
    if not plain_text:
        return []

    pattern = build_pattern(search_names(candidates))
    if pattern is None:
        return []

    return [
        Match(text=found.group(0), start=found.start(), end=found.end(), candidate_id=None)
        for found in pattern.finditer(plain_text)
    ]


def canonical_name(text, name_to_id):
    """Map a matched string back to the candidate name it stands for."""
    if text in name_to_id:
        return text

    name = uppercase_initial(text)
    if name != text and allows_lowercase_match(name):
        return name

    return None


def resolve_matches(matches, candidates):
    """
    Reduce matches to distinct strings and resolve each to a candidate id.

    Only the first occurrence of each string is kept. When several candidates
    share a name, the first one in candidate order wins.

    Returns:
        List of Match tuples with candidate_id set; unresolvable strings are dropped
    """
    name_to_id = {}
    for identifier, name in dict(candidates).items():
        name_to_id.setdefault(name, identifier)

    resolved = []
    seen = set()
    for match in matches:
        if match.text in seen:
            continue
        seen.add(match.text)

        name = canonical_name(match.text, name_to_id)
        identifier = name_to_id.get(name) if name else None
        if identifier is None:
            logger.debug(f"No candidate for matched text '{match.text}'")
            continue

        resolved.append(match._replace(candidate_id=identifier))

    return resolved


def _inside_markup(fragment, index):
    """Check if a position is inside a tag or inside an existing <a> element."""
    before = fragment[:index]

    # Inside a tag (attribute values, tag names)
    if before.rfind('<') > before.rfind('>'):
        return True

    # More open anchors than closed ones before this position
    return len(_ANCHOR_OPEN.findall(before)) > len(_ANCHOR_CLOSE.findall(before))


def build_anchor(url, text, link_class=None):
    """Anchor markup around text taken as-is from the fragment."""
    if link_class:
        return Markup('<a href="{}" class="{}">{}</a>').format(url, link_class, Markup(text))
    return Markup('<a href="{}">{}</a>').format(url, Markup(text))


def fragment_forms(text):
    """
    Ways a plain text string can be written in HTML.

    Text formats differ: full_html keeps "R&D" as written, plain_text escapes
    it to "R&amp;D", and markdown escapes '"' as &quot; but leaves "'" alone.

    Returns:
        The text as written, then escaped with each quote spelling, without duplicates
    """
    escaped = str(escape(text))
    forms = [text]
    for double in ('&#34;', '&quot;', '"'):
        for single in ('&#39;', '&#x27;', "'"):
            forms.append(escaped.replace('&#34;', double).replace('&#39;', single))
    return list(dict.fromkeys(forms))


def _find_link_target(fragment, target):
    """Position of the first linkable occurrence of target, or -1."""
    start = fragment.find(target)

    while start != -1:
        end = start + len(target)
        if (start > 0 and fragment[start - 1].isspace()
                and is_whole_word(fragment, start, end)
                and not _inside_markup(fragment, start)):
            return start
        start = fragment.find(target, start + 1)

    return -1


def insert_link(fragment, text, url, link_class=None):
    """
    Link the first whitespace-prefixed, whole-word occurrence of text in an HTML fragment.

    The text is looked up as written and in its escaped forms, whichever the
    fragment holds first. The preceding whitespace character is replaced by a
    single space. Occurrences inside tags or inside existing links are skipped.

    Args:
        fragment: HTML string
        text: Matched plain text
        url: Link target
        link_class: Optional CSS class for the anchor

    Returns:
        The fragment with one link inserted, or unchanged if no occurrence qualifies
    """
    found = None
    for target in fragment_forms(text):
        start = _find_link_target(fragment, target)
        if start != -1 and (found is None or start < found[0]):
            found = (start, target)

    if found is None:
        return fragment

    start, target = found
    anchor = build_anchor(url, target, link_class)
    return f"{fragment[:start - 1]} {anchor}{fragment[start + len(target):]}"


def link_entities(plain_text, rendered_fragment, candidates, url_builder, link_class=None):
    """
    Hyperlink mentions of candidate names in a rendered fragment.

    Args:
        plain_text: Raw text the fragment was rendered from; matching runs on this
        rendered_fragment: HTML produced from plain_text by the text format
        candidates: Ordered mapping of id -> name (or iterable of (id, name) pairs)
        url_builder: Callable returning the URL for an id, raising LinkBuildError
            when it has none
        link_class: Optional CSS class for the generated anchors

    Returns:
        The fragment with links inserted. The same object is returned when
        nothing was linked.
    """
    if not candidates or not rendered_fragment:
        return rendered_fragment

    matches = resolve_matches(find_matches(plain_text, candidates), candidates)
    if not matches:
        return rendered_fragment

    linked = str(rendered_fragment)
    for match in matches:
        try:
            url = url_builder(match.candidate_id)
        except LinkBuildError as e:
            logger.debug(f"Leaving '{match.text}' unlinked: {e}")
            continue

        linked = insert_link(linked, match.text, url, link_class)

    if isinstance(rendered_fragment, Markup):
        return Markup(linked)
    return linked
