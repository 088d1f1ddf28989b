from studiosg.camera.arcball import ArcballCamera, CameraState, load_camera_states

__all__ = ["ArcballCamera", "CameraState", "load_camera_states"]
