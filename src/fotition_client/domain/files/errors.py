class MissingParamName(Exception):
    def __init__(self, filename: str):
        super().__init__(
            f"File {filename!r} has no param_name; set it before sending the request."
        )
        self.filename = filename
