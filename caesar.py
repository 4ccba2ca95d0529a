#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CAESAR CIPHER — ядро преобразования
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Посимвольный сдвиг латинских букв на фиксированный ключ:
  1. Индекс буквы в алфавите (0..25) и обратно
  2. Модульный сдвиг индекса (настоящий modulo, отрицательные ключи тоже)
  3. Сдвиг одного символа с сохранением регистра
  4. Сдвиг всего текста, длина не меняется

Всё, что не является буквой a-z / A-Z, проходит без изменений.
"""

from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════════
# АЛФАВИТ
# ═══════════════════════════════════════════════════════════════════════════════

EN_ALPHA = 'abcdefghijklmnopqrstuvwxyz'
EN_UPPER = EN_ALPHA.upper()
EN_SIZE  = len(EN_ALPHA)  # 26

_EN_INDEX = {c: i for i, c in enumerate(EN_ALPHA)}
_EN_UPPER_SET = frozenset(EN_UPPER)


def alphabet_index(char: str) -> Optional[int]:
    """Индекс строчной латинской буквы или None"""
    return _EN_INDEX.get(char)


def letter_at(index: int) -> str:
    """Обратное отображение: индекс 0..25 -> буква (диапазон гарантирует вызывающий)"""
    return EN_ALPHA[index]


# ═══════════════════════════════════════════════════════════════════════════════
# СДВИГ
# ═══════════════════════════════════════════════════════════════════════════════

def shift_index(index: int, shift: int) -> int:
    # % в Python уже берёт знак делителя: (0 - 1) % 26 == 25
    return (index + shift) % EN_SIZE


def shift_char(char: str, shift: int) -> str:
    """
    Сдвигает один символ.

    Заглавная буква сдвигается как строчная и возвращается заглавной.
    Цифры, пунктуация, пробелы и не-латинские буквы возвращаются как есть.
    """
    is_upper = char in _EN_UPPER_SET
    if not is_upper and char not in _EN_INDEX:
        return char

    idx = alphabet_index(char.lower() if is_upper else char)
    if idx is None:
        return char

    new_char = letter_at(shift_index(idx, shift))
    return new_char.upper() if is_upper else new_char


def transform(shift: int, text: str) -> str:
    """
    Возвращает text, сдвинутый на shift.

    >>> transform(1, "Hello world")
    'Ifmmp xpsme'
    """
    return ''.join(shift_char(char, shift) for char in text)


caesar_cipher = transform


def encrypt(text: str, shift: int) -> str:
    return transform(shift, text)


def decrypt(text: str, shift: int) -> str:
    return transform(-shift, text)
