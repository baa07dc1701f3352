# a2s_responder/singleton.py


class Singleton:
    """
    Базовый класс-одиночка: повторный вызов конструктора возвращает тот же объект.
    __init__ наследника вызывается каждый раз, поэтому он должен сам защищаться от повторной инициализации.
    """
    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in Singleton._instances:
            Singleton._instances[cls] = super().__new__(cls)
        return Singleton._instances[cls]
