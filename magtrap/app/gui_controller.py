import time
import dearpygui.dearpygui as dpg


def _make_callbacks(shared):
    def field_strength_cb(sender, app_data, user_data):
        shared['field_strength'] = float(app_data)
    def charge_multiplier_cb(sender, app_data, user_data):
        shared['charge_multiplier'] = float(app_data)
    def trap_radius_cb(sender, app_data, user_data):
        shared['trap_radius'] = float(app_data)
    def trace_cb(sender, app_data, user_data):
        shared['trace_enabled'] = bool(app_data)
    def flag_cb(sender, app_data, user_data):
        shared[user_data] = True
    return field_strength_cb, charge_multiplier_cb, trap_radius_cb, trace_cb, flag_cb


def run_gui(shared):
    """
    Run the DearPyGui control panel in its own process.
    Tunables go into `shared` continuously; buttons raise one-shot flags.
    """
    dpg.create_context()

    field_strength_cb, charge_multiplier_cb, trap_radius_cb, trace_cb, flag_cb = _make_callbacks(shared)

    with dpg.window(label="Trap Controls", tag="controls_window", width=380, height=420):
        dpg.add_text("Magnetic Field Strength")
        dpg.add_slider_float(label="Strength", tag="field_strength_slider",
                             default_value=float(shared.get('field_strength', 3.0)),
                             min_value=0.0, max_value=10.0, callback=field_strength_cb)
        dpg.add_text("Charge Magnitude Multiplier")
        dpg.add_slider_float(label="Multiplier", tag="charge_multiplier_slider",
                             default_value=float(shared.get('charge_multiplier', 1.0)),
                             min_value=0.5, max_value=5.0, callback=charge_multiplier_cb)
        dpg.add_text("Trap Boundary (for Circular Trap)")
        dpg.add_slider_float(label="Radius", tag="trap_radius_slider",
                             default_value=float(shared.get('trap_radius', 150.0)),
                             min_value=50.0, max_value=float(shared.get('max_trap_radius', 300.0)),
                             callback=trap_radius_cb)
        dpg.add_checkbox(label="Show Trajectories", tag="trace_checkbox",
                         default_value=bool(shared.get('trace_enabled', False)), callback=trace_cb)
        dpg.add_separator()
        with dpg.group(horizontal=True):
            dpg.add_button(label="Circular Trap", callback=flag_cb, user_data='preset_ring')
            dpg.add_button(label="Magnetic Bottle", callback=flag_cb, user_data='preset_bottle')
            dpg.add_button(label="Mirror Trap", callback=flag_cb, user_data='preset_mirror')
        dpg.add_button(label="Clear All", callback=flag_cb, user_data='clear_all')
        dpg.add_button(label="Start/Pause Simulation (R)", callback=flag_cb, user_data='toggle_running')
        with dpg.group(horizontal=True):
            dpg.add_button(label="Toggle Recording", callback=flag_cb, user_data='toggle_recording')
            dpg.add_button(label="Replay Recording", callback=flag_cb, user_data='start_replay')
        dpg.add_separator()
        dpg.add_text("Keys: 1/2 positive/negative charge, Shift for lazy, Alt for half charge.")
        dpg.add_text("Hold 3/4 to paint clockwise/counterclockwise coils, 0 to erase.")
        dpg.add_text("Status:", tag="status_label")
        dpg.add_text("", tag="status_text")

    dpg.create_viewport(title='Trap Controls', width=400, height=460)
    dpg.set_primary_window("controls_window", True)
    dpg.setup_dearpygui()
    dpg.show_viewport()

    try:
        while not shared.get('__exit__', False) and dpg.is_dearpygui_running():
            # auto-adjust raises the field strength in the main process; follow it
            try:
                dpg.set_value("field_strength_slider", float(shared.get('field_strength', 3.0)))
                status = shared.get('status', '')
            except Exception:
                status = "status error"
            dpg.set_value("status_text", status)
            dpg.render_dearpygui_frame()
            time.sleep(0.01)
    finally:
        dpg.destroy_context()


if __name__ == "__main__":
    from multiprocessing import Manager
    mgr = Manager()
    shared = mgr.dict()
    shared['field_strength'] = 3.0
    shared['charge_multiplier'] = 1.0
    shared['trap_radius'] = 150.0
    run_gui(shared)
