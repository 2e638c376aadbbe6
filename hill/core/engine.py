"""
Hill Engine
============

Central orchestrator for the HillForge matrix tools. :class:`HillEngine`
turns configuration plus raw rows / vectors / text into matrix engine
calls and wraps the outcome in :class:`shared.models.OperationResult`
objects carrying findings and a structured metadata payload.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the matrix, key generator and cipher
subsystems.

Matrix engine errors are logged and re-raised; a singular matrix passed
to :meth:`HillEngine.analyze_matrix` is not an error but a HIGH finding.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Optional, Sequence

from shared.config import ForgeConfig
from shared.logger import ForgeLogger
from shared.math_utils import gcd
from shared.models import Finding, OperationResult, Severity

from hill.core.errors import MatrixError, NotInvertibleError
from hill.core.hill_cipher import HillCipher
from hill.core.keygen import KeyGenerator, KeyMatrix
from hill.core.matrix import ModMatrix, scalar_inverse
from hill.core.models import (
    CipherTextResult,
    InversionResult,
    KeyGenerationResult,
    MatrixSnapshot,
    TransformResult,
)

_TOOL_NAME = "hill"

_LINEARITY_FINDING = Finding(
    severity=Severity.MEDIUM,
    title="Linear Cipher Key",
    description=(
        "A Hill cipher is linear: N known plaintext/ciphertext block pairs "
        "recover the key by solving one linear system modulo the modulus."
    ),
    recommendation="Use for teaching or puzzles only, never to protect data.",
)


def _subject(matrix: ModMatrix) -> str:
    return f"{matrix.dimension}x{matrix.dimension} mod {matrix.modulus}"


class HillEngine:
    """Orchestrates key generation, inversion, transforms and text ciphering.

    Usage::

        engine = HillEngine()
        result = engine.generate_key(dimension=3, modulus=26, seed=7)
        result = engine.analyze_matrix([[3, 3], [2, 5]], modulus=26)
        result = engine.encrypt_text("attack at dawn", [[3, 3], [2, 5]])

    Attributes:
        config: HillForge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        self.logger = logger or ForgeLogger.from_config(
            "hill.engine", self.config.global_settings
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def build_matrix(
        self,
        rows: Sequence[Sequence[int]],
        modulus: Optional[int] = None,
    ) -> ModMatrix:
        """Build a matrix honouring the configured modulus policy."""
        return ModMatrix.from_rows(
            rows,
            modulus if modulus is not None else self.config.matrix.default_modulus,
            strict_modulus=self.config.matrix.strict_modulus,
        )

    def _modulus_findings(self, requested: int, matrix: ModMatrix) -> list[Finding]:
        if requested == matrix.modulus:
            return []
        return [Finding(
            severity=Severity.LOW,
            title="Modulus Adjusted",
            description=(
                f"Requested modulus {requested} is outside the supported range "
                f"and was clamped to {matrix.modulus}."
            ),
            evidence={"requested": requested, "effective": matrix.modulus},
            recommendation="Set matrix.strict_modulus to reject such values instead.",
        )]

    # ------------------------------------------------------------------ #
    #  Key generation
    # ------------------------------------------------------------------ #

    def generate_key(
        self,
        dimension: Optional[int] = None,
        modulus: Optional[int] = None,
        *,
        seed: Optional[int] = None,
        max_attempts: Optional[int] = None,
    ) -> OperationResult:
        """Generate a random invertible key matrix.

        Arguments left as ``None`` fall back to the ``[keygen]`` config
        section. A budget of ``0`` means unbounded.

        Raises:
            GenerationExhaustedError: Retry budget exhausted.
        """
        cfg = self.config.keygen
        dimension = cfg.dimension if dimension is None else dimension
        requested_modulus = cfg.modulus if modulus is None else modulus
        seed = cfg.seed if seed is None else seed
        budget = cfg.max_attempts if max_attempts is None else max_attempts

        generator = KeyGenerator(
            dimension,
            requested_modulus,
            seed=seed,
            max_attempts=budget or None,
            strict_modulus=self.config.matrix.strict_modulus,
            logger=self.logger,
        )
        result = OperationResult(
            tool_name=_TOOL_NAME,
            operation="keygen",
            subject=f"{generator.dimension}x{generator.dimension} mod {generator.modulus}",
        )

        self.logger.info(
            "Generating %dx%d key mod %d",
            generator.dimension, generator.dimension, generator.modulus,
        )
        try:
            with self.logger.timed("key generation"):
                key = generator.generate()
                inverse = key.inverse(method=self.config.matrix.inverse_method)
        except MatrixError as exc:
            self.logger.error("Key generation failed: %s", exc)
            raise

        det = key.key_determinant
        payload = KeyGenerationResult(
            key=MatrixSnapshot.of(key),
            inverse=MatrixSnapshot.of(inverse),
            determinant=det,
            determinant_inverse=scalar_inverse(det, key.modulus),
            attempts=generator.last_attempts,
            max_attempts=generator.max_attempts,
            seed=seed,
        )
        result.metadata = payload.model_dump()

        for finding in self._modulus_findings(requested_modulus, key):
            result.add_finding(finding)
        result.add_finding(Finding(
            severity=Severity.INFO,
            title="Invertible Key Generated",
            description=(
                f"Determinant {det} is coprime to {key.modulus}; accepted after "
                f"{generator.last_attempts} draw(s)."
            ),
            evidence={"determinant": det, "attempts": generator.last_attempts},
        ))
        result.add_finding(_LINEARITY_FINDING.model_copy())

        return result.finalize(
            f"Generated {_subject(key)} key in {generator.last_attempts} draw(s)"
        )

    # ------------------------------------------------------------------ #
    #  Determinant analysis / inversion
    # ------------------------------------------------------------------ #

    def analyze_matrix(
        self,
        rows: Sequence[Sequence[int]],
        modulus: Optional[int] = None,
    ) -> OperationResult:
        """Compute determinant, adjugate and, if it exists, the inverse."""
        requested_modulus = (
            modulus if modulus is not None else self.config.matrix.default_modulus
        )
        matrix = self.build_matrix(rows, requested_modulus)
        result = OperationResult(
            tool_name=_TOOL_NAME, operation="inspect", subject=_subject(matrix)
        )

        with self.logger.operation("inspect"):
            det = matrix.determinant()
            divisor = gcd(det, matrix.modulus)
            adjugate = matrix.adjugate()
            payload = InversionResult(
                matrix=MatrixSnapshot.of(matrix),
                determinant=det,
                gcd=divisor,
                invertible=divisor == 1,
                adjugate=MatrixSnapshot.of(adjugate),
            )

            if payload.invertible:
                det_inv = scalar_inverse(
                    det, matrix.modulus, method=self.config.matrix.inverse_method
                )
                inverse = adjugate.scalar_multiply(det_inv)
                identity = ModMatrix.identity(matrix.dimension, matrix.modulus)
                payload.determinant_inverse = det_inv
                payload.inverse = MatrixSnapshot.of(inverse)
                payload.verified = inverse.multiply(matrix) == identity
                self.logger.debug("Inverse verified: %s", payload.verified)

        result.metadata = payload.model_dump()
        for finding in self._modulus_findings(requested_modulus, matrix):
            result.add_finding(finding)

        if payload.invertible:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Matrix Is Invertible",
                description=(
                    f"gcd({det}, {matrix.modulus}) = 1; determinant inverse is "
                    f"{payload.determinant_inverse}."
                ),
                evidence={"determinant": det, "gcd": divisor},
            ))
            summary = f"{_subject(matrix)}: det={det}, invertible"
        else:
            result.add_finding(Finding(
                severity=Severity.HIGH,
                title="Matrix Is Not Invertible",
                description=(
                    f"Determinant {det} shares the factor {divisor} with modulus "
                    f"{matrix.modulus}; the matrix cannot serve as a cipher key."
                ),
                evidence={"determinant": det, "gcd": divisor},
                recommendation="Generate a key with 'keygen' or change an entry.",
            ))
            summary = f"{_subject(matrix)}: det={det}, not invertible"

        return result.finalize(summary)

    def invert(
        self,
        rows: Sequence[Sequence[int]],
        modulus: Optional[int] = None,
    ) -> OperationResult:
        """Like :meth:`analyze_matrix`, but a singular matrix is an error.

        Raises:
            NotInvertibleError: The determinant is not a unit.
        """
        result = self.analyze_matrix(rows, modulus)
        result.operation = "invert"
        if not result.metadata["invertible"]:
            self.logger.error("Inversion failed: %s", result.summary)
            raise NotInvertibleError(
                f"matrix is not invertible ({result.summary})",
                value=result.metadata["determinant"],
                modulus=result.metadata["matrix"]["modulus"],
            )
        return result

    # ------------------------------------------------------------------ #
    #  Vector transform
    # ------------------------------------------------------------------ #

    def transform(
        self,
        rows: Sequence[Sequence[int]],
        vector: Sequence[int],
        modulus: Optional[int] = None,
    ) -> OperationResult:
        """Apply a matrix to a vector.

        Raises:
            DimensionMismatchError: Vector length differs from the dimension.
        """
        matrix = self.build_matrix(rows, modulus)
        result = OperationResult(
            tool_name=_TOOL_NAME, operation="apply", subject=_subject(matrix)
        )
        try:
            output = matrix.apply(vector)
        except MatrixError as exc:
            self.logger.error("Transform failed: %s", exc)
            raise

        result.metadata = TransformResult(
            matrix=MatrixSnapshot.of(matrix),
            vector=list(vector),
            result=output,
        ).model_dump()
        return result.finalize(f"{list(vector)} -> {output}")

    # ------------------------------------------------------------------ #
    #  Text cipher
    # ------------------------------------------------------------------ #

    def _cipher(self, key_rows: Sequence[Sequence[int]], alphabet: Optional[str]) -> HillCipher:
        alphabet = alphabet or self.config.cipher.alphabet
        key = KeyMatrix.from_rows(
            key_rows, len(alphabet), strict_modulus=True
        )
        return HillCipher(key, alphabet, self.config.cipher.pad_char)

    def _run_cipher(
        self,
        direction: str,
        text: str,
        key_rows: Sequence[Sequence[int]],
        alphabet: Optional[str],
    ) -> OperationResult:
        try:
            cipher = self._cipher(key_rows, alphabet)
            output = cipher.encrypt(text) if direction == "encrypt" else cipher.decrypt(text)
        except MatrixError as exc:
            self.logger.error("%s failed: %s", direction.capitalize(), exc)
            raise

        result = OperationResult(
            tool_name=_TOOL_NAME, operation=direction, subject=_subject(cipher.key)
        )
        result.metadata = CipherTextResult(
            direction=direction,
            key=MatrixSnapshot.of(cipher.key),
            alphabet=cipher.alphabet,
            input_text=text,
            normalized=cipher.normalize(text),
            output_text=output,
        ).model_dump()
        result.add_finding(_LINEARITY_FINDING.model_copy())
        return result.finalize(output)

    def encrypt_text(
        self,
        plaintext: str,
        key_rows: Sequence[Sequence[int]],
        alphabet: Optional[str] = None,
    ) -> OperationResult:
        """Encrypt *plaintext* with the key given as rows.

        Raises:
            NotInvertibleError: The key is singular.
            InvalidModulusError: The alphabet is shorter than the minimum modulus.
        """
        return self._run_cipher("encrypt", plaintext, key_rows, alphabet)

    def decrypt_text(
        self,
        ciphertext: str,
        key_rows: Sequence[Sequence[int]],
        alphabet: Optional[str] = None,
    ) -> OperationResult:
        return self._run_cipher("decrypt", ciphertext, key_rows, alphabet)
