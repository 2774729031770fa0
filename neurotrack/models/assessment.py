"""Developmental assessment recorded alongside a session."""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class AreaAssessment(BaseModel):
    """Common fields for every developmental area."""
    nivel: int = Field(default=3, ge=1, le=5)
    observacoes: str = ""


class BehavioralArea(AreaAssessment):
    agitacao: str = "baixa"
    rigidez: str = "flexivel"


class EmotionalArea(AreaAssessment):
    estado_humor: str = "estavel"
    regulacao: str = "adequada"


class MotorArea(AreaAssessment):
    coordenacao_fina: str = "adequada"
    coordenacao_grossa: str = "adequada"


class CognitiveArea(AreaAssessment):
    atencao: str = "adequada"
    memoria: str = "adequada"
    raciocinio: str = "adequado"


class CommunicationArea(AreaAssessment):
    verbal: str = "adequada"
    nao_verbal: str = "adequada"
    compreensao: str = "adequada"


AREAS = ("comportamental", "emocional", "motora", "cognitiva", "comunicacao")


class DevelopmentAssessment(BaseModel):
    """
    Per-area levels (1-5) and descriptors for one session.

    Kept as a structured sub-record so it never has to be recovered
    from the free-text observations.
    """
    comportamental: BehavioralArea = Field(default_factory=BehavioralArea)
    emocional: EmotionalArea = Field(default_factory=EmotionalArea)
    motora: MotorArea = Field(default_factory=MotorArea)
    cognitiva: CognitiveArea = Field(default_factory=CognitiveArea)
    comunicacao: CommunicationArea = Field(default_factory=CommunicationArea)
    profissional: str = "neuropsicologia"
    medicacao: Optional[str] = None

    def levels(self) -> Dict[str, int]:
        return {area: getattr(self, area).nivel for area in AREAS}

    def mean_level(self) -> float:
        levels = self.levels()
        return sum(levels.values()) / len(levels)

    def weakest_areas(self) -> List[str]:
        """Areas sharing the lowest level, in canonical area order."""
        levels = self.levels()
        lowest = min(levels.values())
        return [area for area in AREAS if levels[area] == lowest]
