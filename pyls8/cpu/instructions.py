"""Instruction handlers and the default LS-8 dispatch table.

Each handler receives the register file, memory and output sink explicitly.
It reads its own operand bytes from the addresses following the opcode and
returns an :class:`Outcome` carrying the program counter it commits to:
either the address past its last operand or, for a taken jump, the target.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from pyls8.bus import Memory

from . import alu
from .alu import AluOp
from .opcodes import Instruction, Opcode, Outcome, OutputSink, build_instruction_table
from .registers import RegisterFile


def _operands(registers: RegisterFile, memory: Memory, count: int) -> Tuple[Tuple[int, ...], int]:
    """Return ``count`` operand bytes and the address just past them."""

    base = registers.program_counter
    values = tuple(memory.load8(base + 1 + offset) for offset in range(count))
    return values, base + 1 + count


def _binary_alu(op: AluOp, registers: RegisterFile, memory: Memory) -> Outcome:
    (reg_a, reg_b), next_pc = _operands(registers, memory, 2)
    result = alu.apply(op, registers.get(reg_a), registers.get(reg_b))
    if result.value is not None:
        registers.set(reg_a, result.value)
    return Outcome(next_pc)


def _unary_alu(op: AluOp, registers: RegisterFile, memory: Memory) -> Outcome:
    (reg,), next_pc = _operands(registers, memory, 1)
    result = alu.apply(op, registers.get(reg))
    registers.set(reg, result.value)
    return Outcome(next_pc)


def op_nop(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """No operation."""

    _, next_pc = _operands(registers, memory, 0)
    return Outcome(next_pc)


def op_hlt(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """Halt the machine."""

    _, next_pc = _operands(registers, memory, 0)
    return Outcome(next_pc, halted=True)


def op_ldi(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """LDI R,I: set the value of a register."""

    (reg, value), next_pc = _operands(registers, memory, 2)
    registers.set(reg, value)
    return Outcome(next_pc)


def op_lds(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """LDS R,R: copy registerB into registerA."""

    (reg_a, reg_b), next_pc = _operands(registers, memory, 2)
    registers.set(reg_a, registers.get(reg_b))
    return Outcome(next_pc)


def op_add(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _binary_alu(AluOp.ADD, registers, memory)


def op_sub(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _binary_alu(AluOp.SUB, registers, memory)


def op_mul(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _binary_alu(AluOp.MUL, registers, memory)


def op_div(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _binary_alu(AluOp.DIV, registers, memory)


def op_inc(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _unary_alu(AluOp.INC, registers, memory)


def op_dec(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    return _unary_alu(AluOp.DEC, registers, memory)


def op_cmp(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """CMP R,R: set the equal flag when both registers hold the same value."""

    (reg_a, reg_b), next_pc = _operands(registers, memory, 2)
    result = alu.apply(AluOp.CMP, registers.get(reg_a), registers.get(reg_b))
    registers.equal_flag = bool(result.equal)
    return Outcome(next_pc)


def op_jmp(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """JMP R: jump to the address stored in the register."""

    (reg,), _ = _operands(registers, memory, 1)
    return Outcome(registers.get(reg))


def op_jeq(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    (reg,), next_pc = _operands(registers, memory, 1)
    if registers.equal_flag:
        return Outcome(registers.get(reg))
    return Outcome(next_pc)


def op_jne(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    (reg,), next_pc = _operands(registers, memory, 1)
    if not registers.equal_flag:
        return Outcome(registers.get(reg))
    return Outcome(next_pc)


def op_psh(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """PSH R: decrement SP, then store the register at the new top of stack."""

    (reg,), next_pc = _operands(registers, memory, 1)
    registers.stack_pointer = registers.stack_pointer - 1
    memory.store8(registers.stack_pointer, registers.get(reg))
    return Outcome(next_pc)


def op_pop(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """POP R: load the top of stack into the register, then increment SP."""

    (reg,), next_pc = _operands(registers, memory, 1)
    address = registers.stack_pointer
    registers.set(reg, memory.load8(address))
    registers.stack_pointer = registers.stack_pointer + 1
    return Outcome(next_pc)


def op_prn(registers: RegisterFile, memory: Memory, output: OutputSink) -> Outcome:
    """PRN R: emit the register's numeric value."""

    (reg,), next_pc = _operands(registers, memory, 1)
    output(registers.get(reg))
    return Outcome(next_pc)


DEFAULT_INSTRUCTIONS: Sequence[Instruction] = (
    Instruction(Opcode.NOP, "NOP", 0, op_nop),
    Instruction(Opcode.HLT, "HLT", 0, op_hlt),
    Instruction(Opcode.LDI, "LDI", 2, op_ldi),
    Instruction(Opcode.LDS, "LDS", 2, op_lds),
    # ALU
    Instruction(Opcode.ADD, "ADD", 2, op_add),
    Instruction(Opcode.SUB, "SUB", 2, op_sub),
    Instruction(Opcode.MUL, "MUL", 2, op_mul),
    Instruction(Opcode.DIV, "DIV", 2, op_div),
    Instruction(Opcode.INC, "INC", 1, op_inc),
    Instruction(Opcode.DEC, "DEC", 1, op_dec),
    Instruction(Opcode.CMP, "CMP", 2, op_cmp),
    # Control transfer
    Instruction(Opcode.JMP, "JMP", 1, op_jmp),
    Instruction(Opcode.JEQ, "JEQ", 1, op_jeq),
    Instruction(Opcode.JNE, "JNE", 1, op_jne),
    # Stack
    Instruction(Opcode.PSH, "PSH", 1, op_psh),
    Instruction(Opcode.POP, "POP", 1, op_pop),
    # Output
    Instruction(Opcode.PRN, "PRN", 1, op_prn),
)


DISPATCH_TABLE: Sequence[Instruction | None] = build_instruction_table(DEFAULT_INSTRUCTIONS)
