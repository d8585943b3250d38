"""Lightweight SQL lexer used for formatting, highlighting and quick checks.

This is not a parser. It classifies words, literals and comments in one
left-to-right scan and drops every other character (operators, commas,
parentheses). Malformed input never raises: an unterminated string or block
comment simply runs to the end of the text.
"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import List

KEYWORDS = frozenset([
    "SELECT", "FROM", "WHERE", "JOIN", "INNER", "LEFT", "RIGHT", "FULL", "OUTER",
    "ON", "GROUP", "BY", "HAVING", "ORDER", "LIMIT", "OFFSET", "INSERT", "INTO",
    "VALUES", "UPDATE", "SET", "DELETE", "CREATE", "TABLE", "ALTER", "DROP",
    "INDEX", "CONSTRAINT", "PRIMARY", "KEY", "FOREIGN", "REFERENCES", "UNIQUE",
    "NOT", "NULL", "DEFAULT", "CHECK", "AND", "OR", "IN", "LIKE", "BETWEEN",
    "EXISTS", "CASE", "WHEN", "THEN", "ELSE", "END", "AS", "DISTINCT", "ALL",
    "UNION", "INTERSECT", "EXCEPT", "WITH", "RECURSIVE", "CAST", "EXTRACT",
])

FUNCTIONS = frozenset([
    "COUNT", "SUM", "AVG", "MIN", "MAX", "ROUND", "FLOOR", "CEIL", "ABS",
    "UPPER", "LOWER", "TRIM", "LENGTH", "SUBSTRING", "REPLACE", "CONCAT",
    "COALESCE", "NULLIF", "NOW", "CURRENT_DATE", "CURRENT_TIME", "DATE_ADD",
    "DATE_SUB", "YEAR", "MONTH", "DAY", "HOUR", "MINUTE", "SECOND",
])

CLAUSE_KEYWORDS = frozenset(["SELECT", "FROM", "WHERE", "GROUP", "ORDER", "HAVING"])
JOIN_KEYWORDS = frozenset(["JOIN", "INNER", "LEFT", "RIGHT", "FULL"])
TABLE_PREFIX_KEYWORDS = frozenset(["FROM", "JOIN", "INTO", "UPDATE"])

MISSING_FROM_ERROR = "SELECT statement missing FROM clause"
UNMATCHED_PARENS_ERROR = "Unmatched parentheses"
EMPTY_QUERY_ERROR = "Empty query"

_WORD = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(r"[0-9][0-9.]*")


class TokenType(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    FUNCTION = "function"


@dataclass(frozen=True)
class SqlToken:
    type: TokenType
    value: str
    start: int
    end: int

    @property
    def upper(self) -> str:
        return self.value.upper()

    def is_keyword(self, *names: str) -> bool:
        return self.type is TokenType.KEYWORD and (not names or self.upper in names)


@dataclass(frozen=True)
class SqlValidation:
    is_valid: bool
    errors: List[str]


def _scan_string(sql: str, start: int) -> int:
    quote = sql[start]
    i = start + 1
    while i < len(sql) and sql[i] != quote:
        # Backslash escapes whatever follows it, including the quote
        i += 2 if sql[i] == "\\" else 1
    return min(i + 1, len(sql))


def _scan_block_comment(sql: str, start: int) -> int:
    close = sql.find("*/", start + 2)
    return len(sql) if close == -1 else close + 2


def _scan_line_comment(sql: str, start: int) -> int:
    newline = sql.find("\n", start)
    return len(sql) if newline == -1 else newline


def _classify_word(word: str) -> TokenType:
    upper = word.upper()
    if upper in KEYWORDS:
        return TokenType.KEYWORD
    if upper in FUNCTIONS:
        return TokenType.FUNCTION
    return TokenType.IDENTIFIER


def tokenize(sql: str) -> List[SqlToken]:
    """Split SQL into classified tokens. Punctuation and operators are dropped."""
    tokens: List[SqlToken] = []
    i = 0
    length = len(sql)

    while i < length:
        char = sql[i]

        if char.isspace():
            i += 1
            continue

        if sql.startswith("--", i):
            end = _scan_line_comment(sql, i)
            tokens.append(SqlToken(TokenType.COMMENT, sql[i:end], i, end))
            i = end
            continue

        if sql.startswith("/*", i):
            end = _scan_block_comment(sql, i)
            tokens.append(SqlToken(TokenType.COMMENT, sql[i:end], i, end))
            i = end
            continue

        if char in ("'", '"'):
            end = _scan_string(sql, i)
            tokens.append(SqlToken(TokenType.STRING, sql[i:end], i, end))
            i = end
            continue

        match = _NUMBER.match(sql, i)
        if match:
            tokens.append(SqlToken(TokenType.NUMBER, match.group(), i, match.end()))
            i = match.end()
            continue

        match = _WORD.match(sql, i)
        if match:
            word = match.group()
            tokens.append(SqlToken(_classify_word(word), word, i, match.end()))
            i = match.end()
            continue

        i += 1

    return tokens


def format_sql(sql: str) -> str:
    """Put each major clause on its own line and uppercase keywords/functions.

    Display helper only: punctuation is not tokenized, so it does not survive
    formatting.
    """
    lines: List[List[str]] = [[]]

    for token in tokenize(sql):
        if token.type in (TokenType.KEYWORD, TokenType.FUNCTION):
            text = token.upper
        else:
            text = token.value

        starts_line = token.is_keyword() and (
            token.upper in CLAUSE_KEYWORDS or token.upper in JOIN_KEYWORDS
        )
        if starts_line and lines[-1]:
            lines.append([])
        lines[-1].append(text)

        # Anything after a line comment on the same line would be commented out
        if token.type is TokenType.COMMENT and token.value.startswith("--"):
            lines.append([])

    return "\n".join(" ".join(line) for line in lines if line).strip()


def highlight_sql(sql: str) -> str:
    """Wrap each token in a ``sql-<type>`` span; all text is HTML-escaped."""
    parts: List[str] = []
    last_end = 0

    for token in tokenize(sql):
        parts.append(html.escape(sql[last_end:token.start]))
        parts.append(
            f'<span class="sql-{token.type.value}">{html.escape(token.value)}</span>'
        )
        last_end = token.end

    parts.append(html.escape(sql[last_end:]))
    return "".join(parts)


def extract_tables(sql: str) -> List[str]:
    """Identifiers right after FROM/JOIN/INTO/UPDATE, first occurrence order."""
    tokens = tokenize(sql)
    tables: List[str] = []

    for token, next_token in zip(tokens, tokens[1:]):
        if (
            token.is_keyword(*TABLE_PREFIX_KEYWORDS)
            and next_token.type is TokenType.IDENTIFIER
            and next_token.value not in tables
        ):
            tables.append(next_token.value)

    return tables


def _paren_balance(sql: str, tokens: List[SqlToken]) -> int:
    # Parentheses inside strings and comments do not count
    balance = 0
    last_end = 0
    for token in tokens:
        if token.type in (TokenType.STRING, TokenType.COMMENT):
            gap = sql[last_end:token.start]
            balance += gap.count("(") - gap.count(")")
            last_end = token.end
    gap = sql[last_end:]
    return balance + gap.count("(") - gap.count(")")


def validate_sql(sql: str) -> SqlValidation:
    """Two heuristic checks: SELECT needs FROM, and parentheses must balance."""
    tokens = tokenize(sql)
    if not tokens:
        return SqlValidation(is_valid=False, errors=[EMPTY_QUERY_ERROR])

    errors: List[str] = []

    has_select = any(t.is_keyword("SELECT") for t in tokens)
    has_from = any(t.is_keyword("FROM") for t in tokens)
    if has_select and not has_from:
        errors.append(MISSING_FROM_ERROR)

    if _paren_balance(sql, tokens) != 0:
        errors.append(UNMATCHED_PARENS_ERROR)

    return SqlValidation(is_valid=not errors, errors=errors)
