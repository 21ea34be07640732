"""
Resultado de los servicios: o un Failure con el error de dominio,
o un Success con el valor. Los errores de infraestructura no pasan por
aquí, se propagan como excepciones.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

F = TypeVar("F")
S = TypeVar("S")


@dataclass(frozen=True)
class Failure(Generic[F]):
    value: F

    @classmethod
    def create(cls, value: F) -> "Failure[F]":
        return cls(value)

    def is_failure(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(Generic[S]):
    value: S

    @classmethod
    def create(cls, value: S) -> "Success[S]":
        return cls(value)

    def is_failure(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True


Either = Union[Failure[F], Success[S]]
