"""
Unit tests for AST node construction

Tests that:
- Every node kind builds from its mandatory fields
- Missing or ill-typed fields are rejected at construction
- Nodes are immutable once built
- Sequence fields are frozen copies in caller order
- The node set is sealed
"""

import dataclasses

import pytest

from sparrow.core.token import TokenType
from sparrow.core.ast import (
    Node, Statement, Expression, NodeConstructionError,
    Program, BlockStatement, LetStatement, ReturnStatement, ExpressionStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean,
    PrefixExpression, InfixExpression,
    IfExpression, FunctionLiteral, CallExpression,
    INT64_MIN, INT64_MAX,
    STATEMENT_TYPES, EXPRESSION_TYPES, NODE_TYPES,
)

from ast_helpers import tok, ident, integer, boolean, block, stmt, infix


class TestLeafConstruction:
    """Test construction of leaf expressions"""

    def test_identifier(self):
        """Test identifier keeps token and name"""
        t = tok("x")
        node = Identifier(t, "x")
        assert node.token is t
        assert node.value == "x"

    def test_integer_literal_bounds(self):
        """Test the signed 64-bit range is accepted at both ends"""
        assert IntegerLiteral(tok("0", TokenType.INT), INT64_MIN).value == INT64_MIN
        assert IntegerLiteral(tok("0", TokenType.INT), INT64_MAX).value == INT64_MAX

    @pytest.mark.parametrize("value", [INT64_MAX + 1, INT64_MIN - 1])
    def test_integer_literal_out_of_range(self, value):
        """Test values outside signed 64-bit are rejected"""
        with pytest.raises(NodeConstructionError, match="64-bit"):
            IntegerLiteral(tok(str(value), TokenType.INT), value)

    def test_integer_literal_rejects_bool(self):
        """Test a bool is not accepted as an integer payload"""
        with pytest.raises(NodeConstructionError):
            IntegerLiteral(tok("1", TokenType.INT), True)

    def test_integer_literal_rejects_str(self):
        """Test a string payload is rejected"""
        with pytest.raises(NodeConstructionError, match="IntegerLiteral.value"):
            IntegerLiteral(tok("5", TokenType.INT), "5")

    def test_boolean_requires_bool(self):
        """Test Boolean rejects a non-bool payload"""
        with pytest.raises(NodeConstructionError):
            Boolean(tok("true"), 1)

    def test_string_literal_keeps_value(self):
        """Test the decoded value is stored alongside the token"""
        node = StringLiteral(tok("a\\n", TokenType.STRING), "a\n")
        assert node.value == "a\n"
        assert node.token.literal == "a\\n"


class TestRequiredFields:
    """Test that mandatory fields cannot be omitted"""

    @pytest.mark.parametrize("build", [
        lambda: Identifier(None, "x"),
        lambda: Identifier(tok("x"), None),
        lambda: IntegerLiteral(tok("1", TokenType.INT), None),
        lambda: StringLiteral(tok("s", TokenType.STRING), None),
        lambda: Boolean(tok("true"), None),
        lambda: PrefixExpression(tok("-"), "-", None),
        lambda: PrefixExpression(tok("-"), None, integer(1)),
        lambda: InfixExpression(tok("+"), None, "+", integer(1)),
        lambda: InfixExpression(tok("+"), integer(1), "+", None),
        lambda: IfExpression(tok("if"), None, block()),
        lambda: IfExpression(tok("if"), boolean(True), None),
        lambda: FunctionLiteral(tok("fn"), [], None),
        lambda: FunctionLiteral(tok("fn"), None, block()),
        lambda: CallExpression(tok("("), None, []),
        lambda: CallExpression(tok("("), ident("f"), None),
        lambda: LetStatement(tok("let"), None, integer(1)),
        lambda: LetStatement(tok("let"), ident("x"), None),
        lambda: ReturnStatement(tok("return"), None),
        lambda: ExpressionStatement(tok("x"), None),
        lambda: BlockStatement(tok("{"), None),
        lambda: Program(None),
    ])
    def test_none_rejected(self, build):
        """Test passing None for a mandatory field raises"""
        with pytest.raises(NodeConstructionError):
            build()

    def test_missing_argument_is_type_error(self):
        """Test omitting a positional field fails like any Python call"""
        with pytest.raises(TypeError):
            LetStatement(tok("let"), ident("x"))

    def test_error_is_type_error(self):
        """Test NodeConstructionError is catchable as TypeError"""
        assert issubclass(NodeConstructionError, TypeError)

    def test_error_names_field(self):
        """Test the error message names the node and field"""
        with pytest.raises(NodeConstructionError, match=r"ReturnStatement\.return_value is required"):
            ReturnStatement(tok("return"), None)

    def test_if_alternative_optional(self):
        """Test a one-armed conditional has no alternative"""
        node = IfExpression(tok("if"), boolean(True), block(ident("x")))
        assert node.alternative is None


class TestFieldKinds:
    """Test that children must be of the declared kind"""

    def test_statement_where_expression_expected(self):
        """Test a statement cannot stand in for an expression"""
        with pytest.raises(NodeConstructionError, match="must be Expression"):
            PrefixExpression(tok("!"), "!", stmt(boolean(True)))

    def test_expression_where_statement_expected(self):
        """Test a bare expression cannot be a block member"""
        with pytest.raises(NodeConstructionError, match=r"statements\[1\]"):
            BlockStatement(tok("{"), [stmt(ident("a")), ident("b")])

    def test_let_name_must_be_identifier(self):
        """Test let binds only an identifier"""
        with pytest.raises(NodeConstructionError, match="must be Identifier"):
            LetStatement(tok("let"), integer(1), integer(2))

    def test_function_parameters_must_be_identifiers(self):
        """Test function parameters are identifiers only"""
        with pytest.raises(NodeConstructionError):
            FunctionLiteral(tok("fn"), [ident("x"), integer(1)], block())

    def test_consequent_must_be_block(self):
        """Test if branches are blocks, not bare statements"""
        with pytest.raises(NodeConstructionError):
            IfExpression(tok("if"), boolean(True), stmt(ident("x")))

    def test_alternative_must_be_block(self):
        """Test a present alternative is checked like the consequent"""
        with pytest.raises(NodeConstructionError):
            IfExpression(tok("if"), boolean(True), block(), ident("y"))

    def test_token_must_be_token(self):
        """Test a raw string is not accepted as the token"""
        with pytest.raises(NodeConstructionError, match="token"):
            Identifier("x", "x")

    def test_string_rejected_as_sequence(self):
        """Test a str is not treated as a sequence of arguments"""
        with pytest.raises(NodeConstructionError, match="sequence"):
            CallExpression(tok("("), ident("f"), "abc")

    def test_program_is_not_a_statement(self):
        """Test a program cannot be nested inside a block"""
        with pytest.raises(NodeConstructionError):
            BlockStatement(tok("{"), [Program([])])


class TestImmutability:
    """Test nodes cannot change after construction"""

    @pytest.mark.parametrize("node,field", [
        (ident("x"), "value"),
        (integer(1), "value"),
        (boolean(True), "value"),
        (infix(integer(1), "+", integer(2)), "left"),
        (IfExpression(tok("if"), boolean(True), block()), "alternative"),
        (ReturnStatement(tok("return"), integer(1)), "return_value"),
        (Program([]), "statements"),
    ])
    def test_assignment_rejected(self, node, field):
        """Test attribute assignment raises FrozenInstanceError"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(node, field, None)

    def test_sequences_are_tuples(self):
        """Test sequence fields are stored as tuples"""
        fn = FunctionLiteral(tok("fn"), [ident("x")], block())
        call = CallExpression(tok("("), ident("f"), [integer(1)])
        program = Program([stmt(ident("a"))])
        assert isinstance(fn.parameters, tuple)
        assert isinstance(call.arguments, tuple)
        assert isinstance(program.statements, tuple)
        assert isinstance(block(ident("a")).statements, tuple)

    def test_caller_list_is_copied(self):
        """Test mutating the list passed in does not reach the node"""
        args = [integer(1), integer(2)]
        call = CallExpression(tok("("), ident("add"), args)
        args.append(integer(3))
        args.reverse()
        assert len(call.arguments) == 2
        assert str(call) == "add (1, 2)"

    def test_order_preserved(self):
        """Test sequences keep the caller's order verbatim"""
        params = [ident(name) for name in ("c", "a", "b")]
        fn = FunctionLiteral(tok("fn"), params, block())
        assert [p.value for p in fn.parameters] == ["c", "a", "b"]

    def test_generator_accepted(self):
        """Test any iterable works for a sequence field"""
        call = CallExpression(tok("("), ident("f"), (integer(i) for i in range(3)))
        assert [a.value for a in call.arguments] == [0, 1, 2]


class TestVariantSets:
    """Test the closed node set"""

    def test_statement_types(self):
        """Test every statement kind is a Statement"""
        assert len(STATEMENT_TYPES) == 4
        assert all(issubclass(cls, Statement) for cls in STATEMENT_TYPES)

    def test_expression_types(self):
        """Test every expression kind is an Expression"""
        assert len(EXPRESSION_TYPES) == 9
        assert all(issubclass(cls, Expression) for cls in EXPRESSION_TYPES)

    def test_program_is_only_root(self):
        """Test Program is a Node but neither a statement nor an expression"""
        assert Program in NODE_TYPES
        assert issubclass(Program, Node)
        assert not issubclass(Program, (Statement, Expression))

    def test_sets_disjoint(self):
        """Test no kind is both a statement and an expression"""
        assert not set(STATEMENT_TYPES) & set(EXPRESSION_TYPES)

    def test_sealed_statement(self):
        """Test new statement kinds cannot be declared outside the package"""
        with pytest.raises(TypeError, match="sealed"):
            class WhileStatement(Statement):
                def __str__(self):
                    return "while"

    def test_sealed_expression(self):
        """Test new expression kinds cannot be declared outside the package"""
        with pytest.raises(TypeError, match="sealed"):
            class FloatLiteral(Expression):
                def __str__(self):
                    return "1.0"

    def test_sealed_against_sibling_package(self):
        """Test a module whose name merely starts with the package name is refused"""
        with pytest.raises(TypeError, match="sealed"):
            class Rogue(Statement):
                __module__ = "sparrow.core_plugin"

                def _format(self, parts):
                    return "rogue"
