from apimark.syntax.model import (
    Annotation,
    DataTypeDecl,
    Declaration,
    FunctionDecl,
    ImplBlock,
    NamespaceDecl,
    OtherDecl,
    ParsedFile,
    SyntaxPath,
)

__all__ = [
    "Annotation",
    "DataTypeDecl",
    "Declaration",
    "FunctionDecl",
    "ImplBlock",
    "NamespaceDecl",
    "OtherDecl",
    "ParsedFile",
    "SyntaxPath",
]
