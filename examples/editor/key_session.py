"""Drive pen mode with key events against an in-memory buffer."""

from penmode import LineBuffer, PenModeConfig, Position, handle_keydown

config = PenModeConfig.from_dict({"isActive": True, "logLevel": "debug"})
config.apply_logging()
state = config.initial_state()
buf = LineBuffer(["I think tha"], cursor=Position(0, 11))

for key in ["Backspace", "ArrowLeft", "ArrowLeft"]:
    outcome = handle_keydown(key, state, buf, config=config)
    print(f"{key:10} {outcome.action.name:6} suppress={outcome.suppress} -> {buf.text!r}")

state.toggle()
print("engaged:", state.engaged, "| persist:", config.with_active(state.engaged).to_dict())
