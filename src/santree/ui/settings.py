"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

from santree.ui.tree.layout import LayoutMetrics

SAMPLE_GAME = (
    "1. d4 d5 2. Bf4 Nf6 3. e3 e6 4. c3 c5 5. Nd2 Nc6 6. Bd3 Bd6 7. Bg3 O-O "
    "8. Ngf3 Qe7 9. Ne5 Nd7 10. Nxc6 bxc6 11. Bxd6 Qxd6 12. Nf3 a5 13. O-O Ba6 "
    "14. Re1 Rfb8 15. Rb1 Bxd3 16. Qxd3 c4 17. Qc2 f5 18. Nd2 Rb5 19. b3 cxb3 "
    "20. axb3 Rab8 21. Qa2 Qc7 22. c4 Rb4 23. cxd5 cxd5 24. Rbc1 Qb6 25. h3 a4 "
    "26. bxa4 Rb2 27. Qa3 Rxd2 28. Qe7 Qd8 29. Qxe6+ Kh8 30. Qxf5 Nf6 "
    "31. g4 Ne4 32. Rf1 h6 33. Rc6 Qh4 34. Rc8+ Rxc8 35. Qxc8+ Kh7 36. Qf5"
)


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    sample_game: str = SAMPLE_GAME

    # Tree diagram
    node_width: int = 140
    node_height: int = 60
    h_gap: int = 24
    v_spacing: int = 120

    def layout_metrics(self) -> LayoutMetrics:
        return LayoutMetrics(
            node_width=self.node_width,
            node_height=self.node_height,
            h_gap=self.h_gap,
            v_spacing=self.v_spacing,
        )
