from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from class_compare.adapters.scanner import (
    Token,
    match_brace,
    next_significant_char,
    strip_comments,
    tokenize,
)
from class_compare.cir.model import (
    ACCESS_MODIFIERS,
    Attribute,
    ClassDecl,
    Method,
    Modifier,
    Parameter,
    ParseResult,
)
from class_compare.errors import EmptyInputError, MalformedMemberError, StructuralError

logger = logging.getLogger(__name__)


class ClassBody(NamedTuple):
    name: str
    extends: Optional[str]
    body: str
    body_start: int           # offset of the first char after '{'


class JavaAdapter:
    """
    Java source -> ClassDecl records, using lexical scanning only.

    Recognises:
      - `class Name [extends Base] {` headers, bodies delimited by brace depth
      - fields:  [modifier] Type name;
      - methods: [modifier] ReturnType name(params) {
    Fields and methods are collected from the whole class body, method
    bodies included. Generics inside signatures, annotations, inner and
    anonymous classes are not handled specially.
    """

    language = "java"

    # ---------------- Helpers ----------------

    def _modifier_before(self, tokens: List[Token], type_index: int) -> Modifier:
        if type_index > 0:
            prev = tokens[type_index - 1]
            if prev.is_word and prev.text in ACCESS_MODIFIERS:
                return prev.text  # type: ignore[return-value]
        return "default"

    def _is_type_token(self, tok: Token) -> bool:
        # An access modifier sitting where the type belongs means there is
        # no type at all (constructors, stray modifiers).
        return tok.is_word and tok.text not in ACCESS_MODIFIERS

    def _match_class_header(self, tokens: List[Token], idx: int) -> Optional[Tuple[str, Optional[str], Token, int]]:
        """
        tokens[idx] is the `class` keyword. Returns
        (name, extends, open_brace_token, index_after_brace) or None.
        """
        window = tokens[idx + 1: idx + 5]
        if not window or not window[0].is_identifier:
            return None
        name = window[0].text

        if len(window) >= 2 and window[1].kind == "LBRACE":
            return name, None, window[1], idx + 3

        if (
            len(window) >= 4
            and window[1].text == "extends"
            and window[2].is_identifier
            and window[3].kind == "LBRACE"
        ):
            return name, window[2].text, window[3], idx + 5

        return None

    def _split_parameters(self, params_text: str) -> List[str]:
        """Split on commas outside generic angle brackets."""
        fragments: List[str] = []
        depth = 0
        current: List[str] = []
        for ch in params_text:
            if ch == "<":
                depth += 1
            elif ch == ">" and depth > 0:
                depth -= 1
            elif ch == "," and depth == 0:
                fragments.append("".join(current))
                current = []
                continue
            current.append(ch)
        fragments.append("".join(current))
        return [f.strip() for f in fragments if f.strip()]

    def _parse_parameter(self, fragment: str) -> Parameter:
        parts = fragment.split()
        if parts and parts[0] == "final":
            parts = parts[1:]
        if len(parts) < 2:
            raise MalformedMemberError(f"Invalid parameter declaration: {fragment!r}")
        return Parameter(type_name=" ".join(parts[:-1]), name=parts[-1])

    # ---------------- Stages ----------------

    def strip_comments(self, source: str) -> str:
        return strip_comments(source)

    def extract_class_bodies(self, source: str) -> Tuple[List[ClassBody], List[str]]:
        """
        Find every class header in source order and cut out its body.
        Classes whose braces never balance are dropped and reported in
        the returned error list.
        """
        tokens = tokenize(source)
        bodies: List[ClassBody] = []
        errors: List[str] = []

        idx = 0
        while idx < len(tokens):
            tok = tokens[idx]
            if not (tok.is_word and tok.text == "class"):
                idx += 1
                continue

            header = self._match_class_header(tokens, idx)
            if header is None:
                idx += 1
                continue

            name, extends, brace, idx = header
            try:
                bodies.append(self._cut_body(source, name, extends, brace))
            except StructuralError as e:
                logger.warning("%s", e)
                errors.append(str(e))

        return bodies, errors

    def _cut_body(self, source: str, name: str, extends: Optional[str], brace: Token) -> ClassBody:
        close = match_brace(source, brace.start)
        if close is None:
            raise StructuralError(name)
        return ClassBody(
            name=name,
            extends=extends,
            body=source[brace.end:close].strip(),
            body_start=brace.end,
        )

    def parse_attributes(self, class_body: str) -> List[Attribute]:
        attributes: List[Attribute] = []
        tokens = tokenize(class_body)

        for idx, tok in enumerate(tokens):
            if tok.kind != "SEMI" or idx < 2:
                continue
            name_tok, type_tok = tokens[idx - 1], tokens[idx - 2]
            if not name_tok.is_identifier or not self._is_type_token(type_tok):
                continue
            # `return x;` has the same shape as a field
            if type_tok.text == "return":
                continue
            attributes.append(
                Attribute(
                    modifier=self._modifier_before(tokens, idx - 2),
                    type_name=type_tok.text,
                    name=name_tok.text,
                )
            )

        return attributes

    def parse_parameters(self, params_text: str) -> List[Parameter]:
        params: List[Parameter] = []
        for fragment in self._split_parameters(params_text):
            try:
                params.append(self._parse_parameter(fragment))
            except MalformedMemberError as e:
                logger.debug("Skipping parameter: %s", e)
        return params

    def parse_methods(self, class_body: str) -> List[Method]:
        """
        A method is `[modifier] ReturnType name(...)` directly followed by
        `{`. Constructors have no return type and are not collected.
        """
        methods: List[Method] = []
        tokens = tokenize(class_body)
        resume_at = 0

        for idx, tok in enumerate(tokens):
            if tok.kind != "LPAREN" or idx < 2 or tok.start < resume_at:
                continue
            name_tok, type_tok = tokens[idx - 1], tokens[idx - 2]
            if not name_tok.is_identifier or not self._is_type_token(type_tok):
                continue

            close = class_body.find(")", tok.end)
            if close == -1 or next_significant_char(class_body, close + 1) != "{":
                continue

            methods.append(
                Method(
                    modifier=self._modifier_before(tokens, idx - 2),
                    return_type=type_tok.text,
                    name=name_tok.text,
                    parameters=tuple(self.parse_parameters(class_body[tok.end:close])),
                )
            )
            resume_at = close + 1

        return methods

    # ---------------- Parsing entry points ----------------

    def parse(self, source: str) -> ParseResult:
        """
        Parse one source unit. Never raises: every problem ends up as an
        advisory string in ParseResult.errors.
        """
        try:
            return self._parse_unit(source)
        except EmptyInputError as e:
            return ParseResult(classes=(), errors=(str(e),))
        except Exception as e:
            logger.exception("Unexpected failure while parsing source unit")
            return ParseResult(classes=(), errors=(f"Error parsing: {e}",))

    def _parse_unit(self, source: str) -> ParseResult:
        bodies, errors = self.extract_class_bodies(self.strip_comments(source))
        if not bodies and not errors:
            raise EmptyInputError()

        classes: Dict[str, ClassDecl] = {}
        for decl in bodies:
            if decl.name in classes:
                # first declaration wins
                msg = f"Duplicate class '{decl.name}' ignored"
                logger.warning("%s", msg)
                errors.append(msg)
                continue
            classes[decl.name] = ClassDecl(
                name=decl.name,
                extends=decl.extends,
                attributes=tuple(self.parse_attributes(decl.body)),
                methods=tuple(self.parse_methods(decl.body)),
            )

        logger.debug("Parsed %d class(es), %d advisory error(s)", len(classes), len(errors))
        return ParseResult(classes=tuple(classes.values()), errors=tuple(errors))

    def parse_units(self, units: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> ParseResult:
        """
        Parse several units and pool their classes. units is a name -> source
        mapping or a sequence of (name, source) pairs; repeated names are all
        parsed. Units are visited in name order (stable for repeats) and
        errors are prefixed with the unit name.
        """
        pairs = list(units.items()) if isinstance(units, Mapping) else list(units)
        classes: List[ClassDecl] = []
        errors: List[str] = []

        for unit_name, source in sorted(pairs, key=lambda pair: pair[0]):
            result = self.parse(source)
            classes.extend(result.classes)
            errors.extend(f"{unit_name}: {err}" for err in result.errors)

        return ParseResult(classes=tuple(classes), errors=tuple(errors))
