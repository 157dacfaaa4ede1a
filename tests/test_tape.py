"""Unit tests for the tape, its nodes and the recording options."""

import threading

import pytest

from wengert import Node, Tape, TapeConfig, TapeOwnershipError, Var


class TestInsertionPrimitives:
    """Test the three ways of appending a node."""

    def test_new_tape_is_empty(self, tape):
        assert len(tape) == 0
        assert tape.nodes == ()

    def test_record_leaf_self_references(self, tape):
        i = tape.record_leaf(3.0)
        j = tape.record_leaf(-1.5)
        assert (i, j) == (0, 1)
        assert tape[0].deps == (0, 0)
        assert tape[1].deps == (1, 1)
        assert tape[1].weights == (0.0, 0.0)
        assert tape[1].is_leaf

    def test_record_unary_pads_second_slot(self, tape):
        tape.record_leaf(2.0)
        k = tape.record_unary(0, 0.25, op="sqrt")
        node = tape[k]
        assert k == 1
        assert node.deps == (0, 1)
        assert node.weights == (0.25, 0.0)
        assert node.op == "sqrt"
        assert not node.is_leaf

    def test_record_binary(self, tape):
        tape.record_leaf(1.0)
        tape.record_leaf(2.0)
        k = tape.record_binary(0, 2.0, 1, 1.0, op="mul")
        assert tape[k] == Node(weights=(2.0, 1.0), deps=(0, 1), op="mul")

    def test_dependencies_never_point_forward(self, tape):
        x = tape.var(1.0)
        y = tape.var(2.0)
        ((x * y).sin() + y.exp() / x).log()
        for i, node in enumerate(tape):
            assert all(dep <= i for dep in node.deps)

    @pytest.mark.parametrize("dep", [-1, 1, 5])
    def test_unknown_dependency_is_rejected(self, tape, dep):
        tape.record_leaf(1.0)
        with pytest.raises(IndexError):
            tape.record_unary(dep, 1.0)
        with pytest.raises(IndexError):
            tape.record_binary(0, 1.0, dep, 1.0)
        assert len(tape) == 1

    def test_edges_skip_self_references(self, tape):
        tape.record_leaf(1.0)
        k = tape.record_unary(0, 3.0)
        assert list(tape[0].edges(0)) == []
        assert list(tape[k].edges(k)) == [(0, 3.0)]


class TestVarHandles:
    """Test handle creation through Tape.var."""

    def test_var_records_one_leaf(self, tape):
        x = tape.var(4, name="x")
        assert isinstance(x, Var)
        assert x.value == 4.0 and isinstance(x.value, float)
        assert x.index == 0
        assert x.tape is tape
        assert x.name == "x"
        assert float(x) == 4.0
        assert len(tape) == 1

    def test_handles_are_immutable(self, tape):
        x = tape.var(1.0)
        with pytest.raises(AttributeError):
            x.value = 2.0

    def test_operations_do_not_touch_operands(self, tape):
        x = tape.var(2.0)
        y = tape.var(3.0)
        z = x * y
        assert (x.value, x.index) == (2.0, 0)
        assert (y.value, y.index) == (3.0, 1)
        assert (z.value, z.index) == (6.0, 2)

    def test_nodes_snapshot_is_detached(self, tape):
        tape.var(1.0)
        snapshot = tape.nodes
        tape.var(2.0)
        assert len(snapshot) == 1
        assert len(tape) == 2


class TestOwnership:
    """The tape only accepts appends from the thread that created it."""

    def test_append_from_other_thread_fails(self, tape):
        x = tape.var(1.0)
        errors = []

        def worker():
            try:
                x.sin()
            except TapeOwnershipError as exc:
                errors.append(exc)

        t = threading.Thread(target=worker)
        t.start()
        t.join()
        assert len(errors) == 1
        assert len(tape) == 1

    def test_owner_thread_can_keep_recording(self, tape):
        x = tape.var(1.0)
        x.exp()
        assert len(tape) == 2


class TestTapeConfig:
    """Test recording options."""

    def test_default_records_subtraction_like_addition(self, tape):
        assert tape.config == TapeConfig()
        assert tape.config.subtrahend_weight == 1.0
        assert not tape.config.is_signed

    def test_signed_config(self, signed_tape):
        assert signed_tape.config.subtrahend_weight == -1.0
        assert signed_tape.config.is_signed

    def test_invalid_weight_rejected(self):
        with pytest.raises(ValueError):
            TapeConfig(subtrahend_weight=0.5)

    def test_config_is_frozen(self):
        cfg = TapeConfig()
        with pytest.raises(AttributeError):
            cfg.subtrahend_weight = -1.0
