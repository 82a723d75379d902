"""
Core Package.

Contains the transform logic:
- Declarative pattern matcher and the require pattern catalog
- Declarator classifier and statement rewriter
- Traversal with replacement and the CommonJS import visitor
- Engine, diagnostics and tracing
"""
