from magtrap.presets.catalog import PresetKind

# one-shot command flags the main loop consumes and resets
COMMAND_FLAGS = ('preset_ring', 'preset_bottle', 'preset_mirror', 'clear_all',
                 'toggle_running', 'toggle_recording', 'start_replay', '__exit__')
PRESET_FLAGS = {'preset_ring': PresetKind.RING, 'preset_bottle': PresetKind.BOTTLE, 'preset_mirror': PresetKind.MIRROR}


def seed_shared(shared, session):
    shared.update(session.tunables.to_dict())
    shared['max_trap_radius'] = session.engine.max_trap_radius
    for flag in COMMAND_FLAGS:
        shared[flag] = False


def apply_shared(session, shared):
    """
    Pull tunables and one-shot commands written by the control panel.
    Returns the field strength the session was given, for `publish_frame`.
    """
    session.set_tunables(
        field_strength=float(shared.get('field_strength', session.tunables.field_strength)),
        charge_multiplier=float(shared.get('charge_multiplier', session.tunables.charge_multiplier)),
        trap_radius=float(shared.get('trap_radius', session.tunables.trap_radius)),
        trace_enabled=bool(shared.get('trace_enabled', session.tunables.trace_enabled)),
    )
    for flag, kind in PRESET_FLAGS.items():
        if shared.get(flag, False):
            session.apply_preset(kind)
            shared[flag] = False
    if shared.get('clear_all', False):
        session.clear_all()
        shared['clear_all'] = False
    if shared.get('toggle_running', False):
        session.toggle_running()
        shared['toggle_running'] = False
    if shared.get('toggle_recording', False):
        session.toggle_recording()
        shared['toggle_recording'] = False
    if shared.get('start_replay', False):
        session.start_replay()
        shared['start_replay'] = False
    return session.tunables.field_strength


def publish_frame(shared, frame, applied_strength):
    """Push status back to the panel; the field strength only when auto-adjust moved it."""
    if frame.field_strength != applied_strength:
        # otherwise a slider edit made since apply_shared would be overwritten
        shared['field_strength'] = frame.field_strength
    shared['status'] = frame.status_line()
