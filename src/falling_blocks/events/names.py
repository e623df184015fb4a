# ============================================================================
# PIECE LIFECYCLE
# ============================================================================
EVENT_PIECE_SPAWNED = "piece_spawned"      # payload: kind, x, y
EVENT_PIECE_MOVED = "piece_moved"          # payload: action, x, y
EVENT_PIECE_ROTATED = "piece_rotated"      # payload: shape
EVENT_PIECE_LOCKED = "piece_locked"        # payload: kind, cells=[(x,y),...]


# ============================================================================
# SCORING & PROGRESSION
# ============================================================================
EVENT_LINES_CLEARED = "lines_cleared"      # payload: count, score, level
EVENT_LEVEL_UP = "level_up"                # payload: level


# ============================================================================
# SESSION
# ============================================================================
EVENT_GAME_OVER = "game_over"              # payload: score
EVENT_STATE_CHANGED = "state_changed"      # payload: snapshot
