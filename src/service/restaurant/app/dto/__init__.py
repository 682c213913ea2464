"""Application layer DTOs"""

from src.service.restaurant.app.dto.action_result import ActionResult, action_boundary

__all__ = ['ActionResult', 'action_boundary']
