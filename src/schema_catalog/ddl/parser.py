"""Recursive-descent parser for GoogleSQL (Cloud Spanner) DDL.

Covers the statements a schema catalog needs:

    CREATE TABLE name ( columns / constraints ) PRIMARY KEY ( keys )
        [, INTERLEAVE IN PARENT parent [ON DELETE {CASCADE | NO ACTION}]]
        [, ROW DELETION POLICY ( ... )]
    CREATE [UNIQUE] [NULL_FILTERED] INDEX name ON table ( keys )
        [STORING ( columns )] [WHERE col IS NOT NULL [AND ...]]
        [, INTERLEAVE IN parent]
    CREATE [OR REPLACE] VIEW name [SQL SECURITY {INVOKER | DEFINER}] AS query
    ALTER TABLE name { ADD | DROP | ALTER | SET } ...
    DROP { TABLE | INDEX | VIEW } name

View queries are parsed only as deep as needed to expose the FROM
structure; expressions are skipped as balanced token runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from .ast import (
    AddColumn, AddTableConstraint, AlterColumn, AlterTable, ColumnDef,
    CompoundQuery, CreateIndex, CreateTable, CreateView, DropColumn,
    DropConstraint, DropStatement, FromSource, Interleave, Join, KeyPart,
    OtherAlteration, OtherStatement, ParenQuery, Query, Select, SetOnDelete,
    Statement, SubQuerySource, TableAlteration, TableConstraint, TableName,
    Unnest, WithQuery,
)
from .lexer import LexError, Token, TokenKind, line_and_column, tokenize


class DdlParseError(ValueError):
    """Raised when DDL text cannot be parsed."""

    def __init__(self, message: str, line: int = 0, column: int = 0, path: str | None = None):
        location = f"{path or '<input>'}:{line}:{column}"
        super().__init__(f"{location}: {message}")
        self.line = line
        self.column = column
        self.path = path


# Statement-leading keywords that are DDL but not modelled
OTHER_DDL_KEYWORDS = frozenset(["GRANT", "REVOKE", "RENAME", "ANALYZE"])

SET_OPERATORS = frozenset(["UNION", "INTERSECT", "EXCEPT"])

JOIN_KEYWORDS = frozenset(["JOIN", "INNER", "CROSS", "FULL", "LEFT", "RIGHT"])

# Clauses that may follow the FROM clause of a SELECT
QUERY_CLAUSE_KEYWORDS = frozenset([
    "WHERE", "GROUP", "HAVING", "QUALIFY", "WINDOW", "ORDER", "LIMIT", "OFFSET",
])

# Keywords that can never be a bare table alias
RESERVED_KEYWORDS = frozenset([
    "ALL", "AND", "ANY", "ARRAY", "AS", "ASC", "AT", "BETWEEN", "BY", "CASE",
    "CAST", "COLLATE", "CONTAINS", "CREATE", "CROSS", "CUBE", "CURRENT",
    "DEFAULT", "DEFINE", "DESC", "DISTINCT", "ELSE", "END", "ENUM", "ESCAPE",
    "EXCEPT", "EXCLUDE", "EXISTS", "EXTRACT", "FALSE", "FETCH", "FOLLOWING",
    "FOR", "FROM", "FULL", "GROUP", "GROUPING", "GROUPS", "HASH", "HAVING",
    "IF", "IGNORE", "IN", "INNER", "INTERSECT", "INTERVAL", "INTO", "IS",
    "JOIN", "LATERAL", "LEFT", "LIKE", "LIMIT", "LOOKUP", "MERGE", "NATURAL",
    "NEW", "NO", "NOT", "NULL", "NULLS", "OF", "OFFSET", "ON", "OR", "ORDER",
    "OUTER", "OVER", "PARTITION", "PRECEDING", "PROTO", "QUALIFY", "RANGE",
    "RECURSIVE", "RESPECT", "RIGHT", "ROLLUP", "ROWS", "SELECT", "SET", "SOME",
    "STRUCT", "TABLESAMPLE", "THEN", "TO", "TREAT", "TRUE", "UNBOUNDED",
    "UNION", "UNNEST", "USING", "WHEN", "WHERE", "WINDOW", "WITH", "WITHIN",
])


class DdlParser:
    """
    Parser over one DDL source text.

    Usage:
        statements = DdlParser(text).parse_ddls()
    """

    def __init__(self, text: str, path: str | None = None):
        self.text = text
        self.path = path
        try:
            self.tokens = tokenize(text)
        except LexError as e:
            line, column = line_and_column(text, e.pos)
            raise DdlParseError(str(e), line, column, path) from e
        self.index = 0

    # =========================================================================
    # Entry points
    # =========================================================================

    def parse_ddls(self) -> list[Statement]:
        """Parse every statement in the text, in order."""
        statements: list[Statement] = []
        while True:
            while self._accept_punct(";"):
                pass
            if self._at_eof():
                return statements
            statements.append(self._parse_statement())
            if not self._at_eof() and not self._at_punct(";"):
                raise self._error(f"expected ';' or end of input, got {self._describe()}")

    def parse_ddl(self) -> Statement:
        """Parse text holding exactly one statement."""
        while self._accept_punct(";"):
            pass
        if self._at_eof():
            raise self._error("expected a DDL statement, got end of input")
        statement = self._parse_statement()
        while self._accept_punct(";"):
            pass
        if not self._at_eof():
            raise self._error(f"expected end of input, got {self._describe()}")
        return statement

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_statement(self) -> Statement:
        start = self._tok.pos
        if self._at_keyword("CREATE"):
            return self._parse_create(start)
        if self._at_keyword("ALTER"):
            return self._parse_alter(start)
        if self._at_keyword("DROP"):
            return self._parse_drop(start)
        if self._at_keyword(*OTHER_DDL_KEYWORDS):
            keyword = self._advance().upper
            return self._parse_other(start, keyword)
        raise self._error(f"expected a DDL statement, got {self._describe()}")

    def _parse_create(self, start: int) -> Statement:
        self._expect_keyword("CREATE")
        or_replace = False
        if self._accept_keyword("OR"):
            self._expect_keyword("REPLACE")
            or_replace = True

        if self._at_keyword("TABLE"):
            return self._parse_create_table(start)
        if self._at_keyword("UNIQUE", "NULL_FILTERED", "INDEX"):
            return self._parse_create_index(start)
        if self._at_keyword("VIEW"):
            return self._parse_create_view(start, or_replace)

        keyword = "CREATE " + self._describe_word()
        return self._parse_other(start, keyword)

    def _parse_create_table(self, start: int) -> CreateTable:
        self._expect_keyword("TABLE")
        if_not_exists = self._accept_if_not_exists()
        name = self._parse_path_name()

        columns: list[ColumnDef] = []
        keys: list[KeyPart] = []
        constraints: list[TableConstraint] = []

        self._expect_punct("(")
        while not self._at_punct(")"):
            self._parse_table_element(columns, keys, constraints)
            if not self._accept_punct(","):
                break
        self._expect_punct(")")

        # Spanner places the primary key after the element list
        if self._accept_keyword("PRIMARY"):
            self._expect_keyword("KEY")
            keys.extend(self._parse_key_parts())

        interleave = None
        while self._accept_punct(","):
            if self._at_keyword("INTERLEAVE"):
                interleave = self._parse_interleave()
            elif self._at_keyword("ROW"):
                self._skip_balanced(lambda t: t.value == ",")
            else:
                raise self._error(f"expected INTERLEAVE or ROW DELETION POLICY, got {self._describe()}")

        return CreateTable(
            name=name,
            columns=tuple(columns),
            primary_keys=tuple(keys),
            constraints=tuple(constraints),
            interleave=interleave,
            if_not_exists=if_not_exists,
            text=self._text_from(start),
        )

    def _parse_table_element(
        self,
        columns: list[ColumnDef],
        keys: list[KeyPart],
        constraints: list[TableConstraint],
    ) -> None:
        if self._at_table_constraint():
            constraints.append(self._parse_constraint(lambda t: t.value == ","))
        elif self._at_keyword("PRIMARY") and self._peek().upper == "KEY":
            self._advance()
            self._advance()
            keys.extend(self._parse_key_parts())
        else:
            column, inline_pk = self._parse_column_def()
            columns.append(column)
            if inline_pk:
                keys.append(KeyPart(column.name))

    def _parse_column_def(self) -> tuple[ColumnDef, bool]:
        name = self._expect_ident()
        data_type = self._parse_type()

        not_null = False
        generated_expr = None
        stored = False
        default_expr = None
        hidden = False
        inline_pk = False

        while True:
            if self._accept_keyword("NOT"):
                self._expect_keyword("NULL")
                not_null = True
            elif self._accept_keyword("NULL"):
                pass
            elif self._accept_keyword("AS"):
                generated_expr = self._parse_paren_text()
                stored = self._accept_keyword("STORED") is not None
            elif self._accept_keyword("DEFAULT"):
                default_expr = self._parse_paren_text()
            elif self._accept_keyword("OPTIONS"):
                self._parse_paren_text()
            elif self._accept_keyword("HIDDEN"):
                hidden = True
            elif self._at_keyword("PRIMARY"):
                self._advance()
                self._expect_keyword("KEY")
                inline_pk = True
            else:
                break

        column = ColumnDef(
            name=name,
            type=data_type,
            not_null=not_null,
            generated_expr=generated_expr,
            stored=stored,
            default_expr=default_expr,
            hidden=hidden,
        )
        return column, inline_pk

    def _parse_type(self) -> str:
        if self._accept_keyword("ARRAY"):
            self._expect_punct("<")
            element = self._parse_type()
            self._expect_close_angle()
            return f"ARRAY<{element}>"

        if self._accept_keyword("STRUCT"):
            self._expect_punct("<")
            inner_start = self._tok.pos
            depth = 1
            while True:
                tok = self._tok
                if tok.kind is TokenKind.EOF:
                    raise self._error("unterminated STRUCT type")
                if tok.value == "<":
                    depth += 1
                elif tok.value == ">":
                    if depth == 1:
                        inner = self.text[inner_start:tok.pos]
                        self._advance()
                        return f"STRUCT<{' '.join(inner.split())}>"
                    depth -= 1
                elif tok.value == ">>":
                    if depth == 1:
                        inner = self.text[inner_start:tok.pos]
                        self._expect_close_angle()
                        return f"STRUCT<{' '.join(inner.split())}>"
                    if depth == 2:
                        # consume the first half, the second closes this STRUCT
                        self._expect_close_angle()
                        depth = 1
                        continue
                    depth -= 2
                self._advance()

        tok = self._tok
        if tok.kind is not TokenKind.IDENT:
            raise self._error(f"expected a column type, got {self._describe()}")
        self._advance()
        type_name = tok.value.upper()

        if self._accept_punct("("):
            size = self._tok
            if size.upper == "MAX" or size.kind is TokenKind.NUMBER:
                self._advance()
            else:
                raise self._error(f"expected a length or MAX, got {self._describe()}")
            self._expect_punct(")")
            return f"{type_name}({size.value.upper()})"

        return type_name

    def _parse_key_parts(self) -> list[KeyPart]:
        self._expect_punct("(")
        parts: list[KeyPart] = []
        while not self._at_punct(")"):
            name = self._expect_ident()
            desc = False
            if self._accept_keyword("DESC"):
                desc = True
            else:
                self._accept_keyword("ASC")
            parts.append(KeyPart(name, desc))
            if not self._accept_punct(","):
                break
        self._expect_punct(")")
        return parts

    def _at_table_constraint(self) -> bool:
        # CHECK, FOREIGN and CONSTRAINT are not reserved, so they may name a column
        following = self._peek()
        if self._at_keyword("CHECK"):
            return following.kind is TokenKind.PUNCT and following.value == "("
        if self._at_keyword("FOREIGN"):
            return following.upper == "KEY"
        if self._at_keyword("CONSTRAINT"):
            return (
                following.kind in (TokenKind.IDENT, TokenKind.QUOTED_IDENT)
                and self._peek(2).upper in ("FOREIGN", "CHECK")
            )
        return False

    def _parse_constraint(self, stop: Callable[[Token], bool]) -> TableConstraint:
        start = self._tok.pos
        name = None
        if self._accept_keyword("CONSTRAINT"):
            name = self._expect_ident()

        if self._at_keyword("FOREIGN"):
            kind = "FOREIGN KEY"
        elif self._at_keyword("CHECK"):
            kind = "CHECK"
        else:
            raise self._error(f"expected FOREIGN KEY or CHECK, got {self._describe()}")

        self._skip_balanced(stop)
        return TableConstraint(name=name, kind=kind, text=self._text_from(start))

    def _parse_interleave(self) -> Interleave:
        self._expect_keyword("INTERLEAVE")
        self._expect_keyword("IN")
        self._accept_keyword("PARENT")
        parent = self._parse_path_name()

        on_delete = None
        if self._accept_keyword("ON"):
            self._expect_keyword("DELETE")
            on_delete = self._parse_delete_action()
        return Interleave(parent=parent, on_delete=on_delete)

    def _parse_delete_action(self) -> str:
        if self._accept_keyword("CASCADE"):
            return "CASCADE"
        self._expect_keyword("NO")
        self._expect_keyword("ACTION")
        return "NO ACTION"

    def _parse_create_index(self, start: int) -> CreateIndex:
        unique = False
        null_filtered = False
        while self._at_keyword("UNIQUE", "NULL_FILTERED"):
            if self._advance().upper == "UNIQUE":
                unique = True
            else:
                null_filtered = True

        self._expect_keyword("INDEX")
        if_not_exists = self._accept_if_not_exists()
        name = self._parse_path_name()
        self._expect_keyword("ON")
        table_name = self._parse_path_name()
        keys = self._parse_key_parts()

        storing: list[str] = []
        if self._accept_keyword("STORING"):
            self._expect_punct("(")
            while not self._at_punct(")"):
                storing.append(self._expect_ident())
                if not self._accept_punct(","):
                    break
            self._expect_punct(")")

        # WHERE col IS NOT NULL [AND ...] filter; not kept in the catalog
        if self._accept_keyword("WHERE"):
            self._skip_balanced(lambda t: t.value == ",")

        interleave_in = None
        if self._accept_punct(","):
            self._expect_keyword("INTERLEAVE")
            self._expect_keyword("IN")
            interleave_in = self._parse_path_name()

        return CreateIndex(
            name=name,
            table_name=table_name,
            keys=tuple(keys),
            storing=tuple(storing),
            unique=unique,
            null_filtered=null_filtered,
            interleave_in=interleave_in,
            if_not_exists=if_not_exists,
            text=self._text_from(start),
        )

    def _parse_create_view(self, start: int, or_replace: bool) -> CreateView:
        self._expect_keyword("VIEW")
        name = self._parse_path_name()

        sql_security = None
        if self._accept_keyword("SQL"):
            self._expect_keyword("SECURITY")
            if not self._at_keyword("INVOKER", "DEFINER"):
                raise self._error(f"expected INVOKER or DEFINER, got {self._describe()}")
            sql_security = self._advance().upper

        self._expect_keyword("AS")
        query = self._parse_query()

        return CreateView(
            name=name,
            query=query,
            or_replace=or_replace,
            sql_security=sql_security,
            text=self._text_from(start),
        )

    def _parse_alter(self, start: int) -> Statement:
        self._expect_keyword("ALTER")
        if not self._accept_keyword("TABLE"):
            keyword = "ALTER " + self._describe_word()
            return self._parse_other(start, keyword)

        table_name = self._parse_path_name()
        alteration = self._parse_table_alteration()
        return AlterTable(
            table_name=table_name,
            alteration=alteration,
            text=self._text_from(start),
        )

    def _parse_table_alteration(self) -> TableAlteration:
        start = self._tok.pos

        if self._accept_keyword("ADD"):
            if self._at_keyword("CONSTRAINT", "FOREIGN", "CHECK"):
                return AddTableConstraint(self._parse_constraint(lambda t: False))
            if self._at_keyword("ROW"):
                return self._parse_other_alteration(start)
            self._accept_keyword("COLUMN")
            if_not_exists = self._accept_if_not_exists()
            column, _ = self._parse_column_def()
            return AddColumn(column=column, if_not_exists=if_not_exists)

        if self._accept_keyword("DROP"):
            if self._accept_keyword("CONSTRAINT"):
                return DropConstraint(self._expect_ident())
            if self._at_keyword("ROW"):
                return self._parse_other_alteration(start)
            self._accept_keyword("COLUMN")
            return DropColumn(self._expect_ident())

        if self._accept_keyword("ALTER"):
            self._accept_keyword("COLUMN")
            name = self._expect_ident()
            self._skip_balanced(lambda t: False)
            return AlterColumn(name=name, text=self._text_from(start))

        if self._accept_keyword("SET"):
            self._expect_keyword("ON")
            self._expect_keyword("DELETE")
            return SetOnDelete(self._parse_delete_action())

        return self._parse_other_alteration(start)

    def _parse_other_alteration(self, start: int) -> OtherAlteration:
        self._skip_balanced(lambda t: False)
        return OtherAlteration(self._text_from(start))

    def _parse_drop(self, start: int) -> Statement:
        self._expect_keyword("DROP")
        if not self._at_keyword("TABLE", "INDEX", "VIEW"):
            keyword = "DROP " + self._describe_word()
            return self._parse_other(start, keyword)

        kind = self._advance().upper
        self._accept_if_exists()
        name = self._parse_path_name()
        return DropStatement(kind=kind, name=name, text=self._text_from(start))

    def _parse_other(self, start: int, keyword: str) -> OtherStatement:
        self._skip_balanced(lambda t: False)
        return OtherStatement(keyword=keyword, text=self._text_from(start))

    # =========================================================================
    # Queries
    # =========================================================================

    def _parse_query(self) -> Query:
        if self._at_keyword("WITH"):
            return self._parse_with()

        first = self._parse_query_term()
        queries: list[Query] = [first]
        op = None
        while self._at_keyword(*SET_OPERATORS):
            keyword = self._advance().upper
            modifier = self._accept_keyword("ALL", "DISTINCT")
            this_op = f"{keyword} {modifier.upper}" if modifier else keyword
            op = op or this_op
            queries.append(self._parse_query_term())

        if len(queries) == 1:
            return first
        return CompoundQuery(op=op, queries=tuple(queries))

    def _parse_query_term(self) -> Query:
        if self._accept_punct("("):
            inner = self._parse_query()
            self._expect_punct(")")
            self._skip_query_tail()
            return ParenQuery(inner)
        if self._at_keyword("SELECT"):
            return self._parse_select()
        raise self._error(f"expected SELECT, got {self._describe()}")

    def _parse_with(self) -> WithQuery:
        self._expect_keyword("WITH")
        self._accept_keyword("RECURSIVE")
        names: list[str] = []
        while True:
            names.append(self._expect_ident())
            self._expect_keyword("AS")
            self._expect_punct("(")
            self._parse_query()
            self._expect_punct(")")
            if not self._accept_punct(","):
                break
        return WithQuery(query=self._parse_query(), cte_names=tuple(names))

    def _parse_select(self) -> Select:
        self._expect_keyword("SELECT")
        self._skip_select_list()

        from_ = None
        if self._accept_keyword("FROM"):
            from_ = self._parse_from_item()

        self._skip_query_tail()
        return Select(from_=from_)

    def _skip_select_list(self) -> None:
        depth = 0
        previous: Token | None = None
        while True:
            tok = self._tok
            if tok.kind is TokenKind.EOF:
                if depth:
                    raise self._error("unbalanced parentheses")
                break
            if depth == 0:
                if tok.value in (")", ";"):
                    break
                if tok.upper == "FROM" or tok.upper in QUERY_CLAUSE_KEYWORDS:
                    break
                # SELECT * EXCEPT (...) / * REPLACE (...) are star modifiers
                if tok.upper in SET_OPERATORS and not (previous is not None and previous.value == "*"):
                    break
            if tok.kind is TokenKind.PUNCT and tok.value in ("(", "["):
                depth += 1
            elif tok.kind is TokenKind.PUNCT and tok.value in (")", "]"):
                depth -= 1
            previous = self._advance()

    def _skip_query_tail(self) -> None:
        self._skip_balanced(lambda t: t.upper in SET_OPERATORS)

    def _parse_from_item(self) -> FromSource:
        left = self._parse_from_primary()
        while True:
            if self._accept_punct(","):
                op = ","
            elif self._at_keyword(*JOIN_KEYWORDS):
                op = self._parse_join_op()
            else:
                return left

            right = self._parse_from_primary()
            if self._accept_keyword("ON"):
                self._skip_balanced(self._ends_join_condition)
            elif self._accept_keyword("USING"):
                self._parse_paren_text()
            left = Join(op=op, left=left, right=right)

    def _parse_join_op(self) -> str:
        words: list[str] = []
        if self._at_keyword("INNER", "CROSS"):
            words.append(self._advance().upper)
        elif self._at_keyword("FULL", "LEFT", "RIGHT"):
            words.append(self._advance().upper)
            if self._accept_keyword("OUTER"):
                words.append("OUTER")
        if self._at_keyword("HASH", "LOOKUP"):
            words.append(self._advance().upper)
        self._expect_keyword("JOIN")
        words.append("JOIN")
        self._skip_hint()
        return " ".join(words)

    @staticmethod
    def _ends_join_condition(tok: Token) -> bool:
        if tok.value == ",":
            return True
        return (
            tok.upper in JOIN_KEYWORDS
            or tok.upper in QUERY_CLAUSE_KEYWORDS
            or tok.upper in SET_OPERATORS
        )

    def _parse_from_primary(self) -> FromSource:
        if self._at_punct("("):
            if self._peek().upper in ("SELECT", "WITH") or self._peek().value == "(":
                self._advance()
                query = self._parse_query()
                self._expect_punct(")")
                return SubQuerySource(query=query, alias=self._parse_alias())
            self._advance()
            inner = self._parse_from_item()
            self._expect_punct(")")
            return inner

        if self._accept_keyword("UNNEST"):
            expr = self._parse_paren_text()
            alias = self._parse_alias()
            if self._accept_keyword("WITH"):
                self._expect_keyword("OFFSET")
                self._parse_alias()
            return Unnest(expr=expr, alias=alias)

        table = self._parse_path_name()
        self._skip_hint()
        alias = self._parse_alias()
        if self._accept_keyword("TABLESAMPLE"):
            self._expect_ident()
            self._parse_paren_text()
        return TableName(table=table, alias=alias)

    def _parse_alias(self) -> str | None:
        if self._accept_keyword("AS"):
            return self._expect_ident()
        tok = self._tok
        if tok.kind is TokenKind.QUOTED_IDENT:
            self._advance()
            return tok.name
        if tok.kind is TokenKind.IDENT and tok.upper not in RESERVED_KEYWORDS:
            self._advance()
            return tok.value
        return None

    def _skip_hint(self) -> None:
        # @{FORCE_INDEX=idx}
        if self._at_punct("@") and self._peek().value == "{":
            self._advance()
            self._advance()
            self._skip_balanced(lambda t: t.value == "}")
            self._expect_punct("}")

    # =========================================================================
    # Token helpers
    # =========================================================================

    @property
    def _tok(self) -> Token:
        return self.tokens[self.index]

    def _peek(self, offset: int = 1) -> Token:
        return self.tokens[min(self.index + offset, len(self.tokens) - 1)]

    def _advance(self) -> Token:
        tok = self.tokens[self.index]
        if tok.kind is not TokenKind.EOF:
            self.index += 1
        return tok

    def _at_eof(self) -> bool:
        return self._tok.kind is TokenKind.EOF

    def _at_keyword(self, *words: str) -> bool:
        return self._tok.upper in words

    def _at_punct(self, value: str) -> bool:
        tok = self._tok
        return tok.kind is TokenKind.PUNCT and tok.value == value

    def _accept_keyword(self, *words: str) -> Token | None:
        if self._at_keyword(*words):
            return self._advance()
        return None

    def _accept_punct(self, value: str) -> bool:
        if self._at_punct(value):
            self._advance()
            return True
        return False

    def _expect_keyword(self, word: str) -> Token:
        if not self._at_keyword(word):
            raise self._error(f"expected {word}, got {self._describe()}")
        return self._advance()

    def _expect_punct(self, value: str) -> Token:
        if not self._at_punct(value):
            raise self._error(f"expected '{value}', got {self._describe()}")
        return self._advance()

    def _expect_close_angle(self) -> None:
        tok = self._tok
        if tok.value == ">":
            self._advance()
        elif tok.value == ">>":
            # split '>>' so the enclosing type can consume the second half
            self.tokens[self.index] = Token(TokenKind.PUNCT, ">", tok.pos + 1, tok.end)
        else:
            raise self._error(f"expected '>', got {self._describe()}")

    def _expect_ident(self) -> str:
        tok = self._tok
        if tok.kind not in (TokenKind.IDENT, TokenKind.QUOTED_IDENT):
            raise self._error(f"expected an identifier, got {self._describe()}")
        self._advance()
        return tok.name

    def _parse_path_name(self) -> str:
        parts = [self._expect_ident()]
        while self._at_punct(".") and self._peek().kind in (TokenKind.IDENT, TokenKind.QUOTED_IDENT):
            self._advance()
            parts.append(self._expect_ident())
        return ".".join(parts)

    def _accept_if_not_exists(self) -> bool:
        if self._at_keyword("IF") and self._peek().upper == "NOT":
            self._advance()
            self._advance()
            self._expect_keyword("EXISTS")
            return True
        return False

    def _accept_if_exists(self) -> bool:
        if self._at_keyword("IF") and self._peek().upper == "EXISTS":
            self._advance()
            self._advance()
            return True
        return False

    def _parse_paren_text(self) -> str:
        """Consume a parenthesized group and return its inner text."""
        self._expect_punct("(")
        inner_start = self._tok.pos
        self._skip_balanced(lambda t: False)
        inner_end = self._tok.pos
        self._expect_punct(")")
        return self.text[inner_start:inner_end].strip()

    def _skip_balanced(self, stop: Callable[[Token], bool]) -> None:
        """
        Skip tokens until `stop` matches at nesting depth 0.

        Also stops (without consuming) at an unmatched ')' or ']', at ';'
        on depth 0 and at end of input.
        """
        depth = 0
        while True:
            tok = self._tok
            if tok.kind is TokenKind.EOF:
                if depth:
                    raise self._error("unbalanced parentheses")
                return
            if tok.kind is TokenKind.PUNCT:
                if depth == 0 and (tok.value == ";" or stop(tok)):
                    return
                if tok.value in ("(", "["):
                    depth += 1
                elif tok.value in (")", "]"):
                    if depth == 0:
                        return
                    depth -= 1
            elif depth == 0 and stop(tok):
                return
            self._advance()

    def _text_from(self, start: int) -> str:
        end = self.tokens[self.index - 1].end if self.index > 0 else start
        return self.text[start:end].strip()

    def _describe(self) -> str:
        tok = self._tok
        if tok.kind is TokenKind.EOF:
            return "end of input"
        return repr(tok.value)

    def _describe_word(self) -> str:
        tok = self._tok
        return tok.value.upper() if tok.kind is TokenKind.IDENT else tok.value

    def _error(self, message: str) -> DdlParseError:
        line, column = line_and_column(self.text, self._tok.pos)
        return DdlParseError(message, line, column, self.path)


def parse_ddls(text: str, path: str | None = None) -> list[Statement]:
    """
    Parse DDL text holding zero or more ';'-separated statements.

    Raises:
        DdlParseError: If the text is not valid DDL.
    """
    return DdlParser(text, path).parse_ddls()


def parse_ddl(text: str) -> Statement:
    """Parse DDL text holding exactly one statement."""
    return DdlParser(text).parse_ddl()


def parse_ddl_file(path: str | Path) -> list[Statement]:
    """Read and parse a DDL file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"DDL file not found: {path}")
    return parse_ddls(path.read_text(encoding="utf-8"), str(path))
