from django.urls import register_converter


class SignedIntConverter:
    """Path converter for integers that may carry a leading minus sign."""

    regex = r"-?[0-9]+"

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value: int) -> str:
        return str(value)


register_converter(SignedIntConverter, "signed_int")
