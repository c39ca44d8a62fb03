from __future__ import annotations

import math
import unittest

from largo.ast import List, Number, Symbol
from largo.errors import Reason
from largo.lexer import tokenize
from largo.parser import parse, parse_atom, read_seq
from largo.printer import to_string


class ParseAtomTests(unittest.TestCase):
    def test_numeric_and_symbolic_atoms(self) -> None:
        self.assertEqual(parse_atom("1.0"), Number(1.0))
        self.assertEqual(parse_atom("Hello"), Symbol("Hello"))
        self.assertEqual(parse_atom("hi1.0hi"), Symbol("hi1.0hi"))

    def test_float_literal_forms(self) -> None:
        cases = (
            ("42", 42.0),
            ("-7", -7.0),
            ("+3", 3.0),
            ("3.5", 3.5),
            (".5", 0.5),
            ("1.", 1.0),
            ("1e3", 1000.0),
            ("2.5E-1", 0.25),
            ("inf", math.inf),
            ("-Infinity", -math.inf),
        )
        for token, expected in cases:
            with self.subTest(token=token):
                self.assertEqual(parse_atom(token), Number(expected))

    def test_nan_token_is_a_number(self) -> None:
        atom = parse_atom("NaN")
        self.assertIsInstance(atom, Number)
        self.assertTrue(math.isnan(atom.value))

    def test_partial_numbers_stay_symbols(self) -> None:
        for token in ("1_000", "1.2.3", "-", "+", "1e", "e5", "0x10", "12abc", "nanx"):
            with self.subTest(token=token):
                self.assertEqual(parse_atom(token), Symbol(token))


class ParserTests(unittest.TestCase):
    def test_parse_simple_call(self) -> None:
        expr, rest = parse(tokenize("(+ 1 2)"))
        self.assertEqual(expr, List((Symbol("+"), Number(1.0), Number(2.0))))
        self.assertEqual(rest, [])

    def test_parse_nested_and_empty_lists(self) -> None:
        expr, rest = parse(tokenize("(a (b ()) c)"))
        self.assertEqual(
            expr,
            List((Symbol("a"), List((Symbol("b"), List(()))), Symbol("c"))),
        )
        self.assertEqual(rest, [])

    def test_parse_bare_atom(self) -> None:
        self.assertEqual(parse(["x"]), (Symbol("x"), []))
        self.assertEqual(parse(["2.5"]), (Number(2.5), []))

    def test_remaining_tokens_are_returned(self) -> None:
        expr, rest = parse(tokenize("1 2"))
        self.assertEqual(expr, Number(1.0))
        self.assertEqual(rest, ["2"])

        expr, rest = parse(tokenize("(+ 1) (x) )"))
        self.assertEqual(expr, List((Symbol("+"), Number(1.0))))
        self.assertEqual(rest, ["(", "x", ")", ")"])

    def test_read_seq_consumes_through_closing_paren(self) -> None:
        expr, rest = read_seq(["1", "(", "a", ")", ")", "tail"])
        self.assertEqual(expr, List((Number(1.0), List((Symbol("a"),)))))
        self.assertEqual(rest, ["tail"])

    def test_empty_token_sequence_fails(self) -> None:
        with self.assertRaises(Reason) as ctx:
            parse([])
        self.assertEqual(ctx.exception.message, "could not get token")

    def test_unbalanced_parens_fail_in_both_directions(self) -> None:
        unclosed = ("(", "(+ 1 2", "((+ 1 2)", "(a (b)")
        for source in unclosed:
            with self.subTest(source=source):
                with self.assertRaises(Reason) as ctx:
                    parse(tokenize(source))
                self.assertEqual(ctx.exception.message, "could not find closing `)`")

        unopened = (")", ") 1", ")(+ 1 2)")
        for source in unopened:
            with self.subTest(source=source):
                with self.assertRaises(Reason) as ctx:
                    parse(tokenize(source))
                self.assertEqual(ctx.exception.message, "unexpected `)`")

    def test_parsed_trees_never_hold_native_operations(self) -> None:
        from largo.values import NativeOperation

        def walk(expr):
            self.assertNotIsInstance(expr, NativeOperation)
            if isinstance(expr, List):
                for item in expr.items:
                    walk(item)

        expr, _ = parse(tokenize("(+ (- 1 2) (+ x (y)) ())"))
        walk(expr)

    def test_round_trip_through_rendering(self) -> None:
        sources = (
            "(+ 1 2)",
            "(a (b c) () (d (e 1.5)))",
            "x",
            "(- 2 (+ 1 2 3))",
        )
        for source in sources:
            with self.subTest(source=source):
                parsed, _ = parse(tokenize(source))
                rendered = to_string(parsed, separator=" ")
                reparsed, rest = parse(tokenize(rendered))
                self.assertEqual(reparsed, parsed)
                self.assertEqual(rest, [])

    def test_comma_rendering_keeps_paren_structure(self) -> None:
        parsed, _ = parse(tokenize("(a (b c) d)"))
        rendered = to_string(parsed)
        self.assertEqual(rendered, "(a,(b,c),d)")
        self.assertEqual(tokenize(rendered), ["(", "a,", "(", "b,c", ")", ",d", ")"])


if __name__ == "__main__":
    unittest.main()
