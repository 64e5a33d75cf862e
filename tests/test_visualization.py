#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        January 29, 2026
License:        MIT License
================================================================================
"""

import io

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from PIL import Image
from pv_canvas.simulation import PVSimulation, create_demo_simulation
from pv_canvas.visualization import (
    VisualizationConfig,
    pixel_to_world,
    render_frame,
    render_frame_png
)


class TestVisualizationConfig:
    """Tests for the view configuration."""

    def test_image_size(self):
        assert VisualizationConfig().image_size == (1160, 710)

    def test_view_contains_box_and_plot(self):
        config = VisualizationConfig()
        assert config.view_x[0] < -500.0 and config.view_x[1] > 500.0
        assert config.view_y[0] < -315.0 and config.view_y[1] > 235.0


class TestPixelToWorld:
    """Tests for click mapping."""

    def test_corners(self):
        config = VisualizationConfig()
        size = (1160, 710)
        assert pixel_to_world(0, 0, size, config) == pytest.approx((-560.0, 340.0))
        assert pixel_to_world(1160, 710, size, config) == pytest.approx((600.0, -370.0))

    def test_scaled_display(self):
        """A half-size display maps to the same world point."""
        config = VisualizationConfig()
        full = pixel_to_world(400, 300, (1160, 710), config)
        half = pixel_to_world(200, 150, (580, 355), config)
        assert full == pytest.approx(half)

    def test_plot_centre_reachable(self):
        """The pixel under the plot centre maps back onto the plot."""
        # One pixel per world unit at the default dpi
        assert pixel_to_world(560, 530, (1160, 710)) == pytest.approx((0.0, -190.0))


class TestRenderFrame:
    """Tests for frame rendering."""

    def test_render_before_first_tick(self):
        sim = create_demo_simulation(seed=0)
        fig = render_frame(sim)
        assert fig is not None
        plt.close(fig)

    def test_readout_drawn(self):
        sim = create_demo_simulation(seed=0)
        result = sim.tick()
        fig = render_frame(sim)
        texts = [t.get_text() for t in fig.axes[0].texts]
        assert result.readout.text in texts
        assert "P" in texts and "V" in texts
        plt.close(fig)

    def test_labels_optional(self):
        sim = create_demo_simulation(seed=0)
        fig = render_frame(sim, VisualizationConfig(show_labels=False))
        assert len(fig.axes[0].texts) == 1
        plt.close(fig)

    def test_uninitialized(self):
        with pytest.raises(RuntimeError):
            render_frame(PVSimulation())

    def test_png_matches_image_size(self):
        """Exported frames have no padding, so clicks can be inverted."""
        sim = create_demo_simulation(seed=0)
        sim.tick()
        config = VisualizationConfig()
        data = render_frame_png(sim, config)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"

        width, height = Image.open(io.BytesIO(data)).size
        assert abs(width - config.image_size[0]) <= 1
        assert abs(height - config.image_size[1]) <= 1
