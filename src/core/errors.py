"""
Ошибки ядра fibmatrix

Таксономия:
- InvalidArgument — аргумент вне домена (отрицательный индекс, показатель
  степени < 1, вызов times() без сомножителей, индекс выше max_index)
- MemoryError — исчерпание памяти при очень больших n; не перехватывается
  и не маскируется, пробрасывается вызывающему коду как есть
"""


class InvalidArgument(ValueError):
    """
    Аргумент вне домена операции.

    Никогда не повторяется и не исправляется внутри ядра: разумного значения
    по умолчанию нет, поэтому ошибка сразу пробрасывается вызывающему коду.
    """
    pass
