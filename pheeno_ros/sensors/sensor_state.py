from dataclasses import dataclass
from typing import Tuple
import threading

from pheeno_ros.sensors.channels import IRSensor, Encoder


# These objects store the latest reading of every sensor channel group.
# Snapshots are immutable so a reader never sees a half-written group.

Vector3 = Tuple[float, float, float]

@dataclass(frozen=True)
class IRSnapshot:
    values: Tuple[float, ...] = (0.0,) * len(IRSensor)

    def __getitem__(self, sensor: IRSensor) -> float:
        return self.values[sensor]

    @property
    def center(self) -> float:
        return self.values[IRSensor.CENTER]

    @property
    def right(self) -> float:
        return self.values[IRSensor.RIGHT]

    @property
    def left(self) -> float:
        return self.values[IRSensor.LEFT]

    @property
    def cright(self) -> float:
        return self.values[IRSensor.CRIGHT]

    @property
    def cleft(self) -> float:
        return self.values[IRSensor.CLEFT]

    @property
    def back(self) -> float:
        return self.values[IRSensor.BACK]

    @classmethod
    def from_readings(cls, center=0.0, right=0.0, left=0.0, cright=0.0, cleft=0.0, back=0.0) -> "IRSnapshot":
        return cls(values=(center, right, left, cright, cleft, back))


@dataclass(frozen=True)
class OdomSnapshot:
    position: Vector3 = (0.0, 0.0, 0.0)
    orientation: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)   # x, y, z, w
    linear: Vector3 = (0.0, 0.0, 0.0)
    angular: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class EncoderSnapshot:
    values: Tuple[int, ...] = (0,) * len(Encoder)

    def __getitem__(self, encoder: Encoder) -> int:
        return self.values[encoder]


@dataclass(frozen=True)
class Vector3Snapshot:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> Vector3:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class SensorSnapshot:
    ir: IRSnapshot
    odom: OdomSnapshot
    encoders: EncoderSnapshot
    magnetometer: Vector3Snapshot
    gyroscope: Vector3Snapshot
    accelerometer: Vector3Snapshot


class SensorState:
    def __init__(self):
        """
        Holds the most recent value of every sensor channel.
        Every channel starts at zero. Updates replace a whole channel group
        under the lock; reads return immutable snapshots.
        """
        self._lock = threading.Lock()
        self._ir = IRSnapshot()
        self._odom = OdomSnapshot()
        self._encoders = EncoderSnapshot()
        self._magnetometer = Vector3Snapshot()
        self._gyroscope = Vector3Snapshot()
        self._accelerometer = Vector3Snapshot()

    #--------------------------------------------------------------------------------
    def update_ir(self, location, value: float):
        """Overwrites a single IR channel. Values are not validated."""
        index = IRSensor(location)
        with self._lock:
            values = list(self._ir.values)
            values[index] = float(value)
            self._ir = IRSnapshot(values=tuple(values))

    #--------------------------------------------------------------------------------
    def update_encoder(self, location, value: int):
        index = Encoder(location)
        with self._lock:
            values = list(self._encoders.values)
            values[index] = int(value)
            self._encoders = EncoderSnapshot(values=tuple(values))

    #--------------------------------------------------------------------------------
    def update_odometry(
        self,
        position: Vector3,
        orientation: Tuple[float, float, float, float],
        linear: Vector3,
        angular: Vector3,
    ):
        """Replaces the whole pose and twist sample."""
        snap = OdomSnapshot(
            position=tuple(float(v) for v in position),
            orientation=tuple(float(v) for v in orientation),
            linear=tuple(float(v) for v in linear),
            angular=tuple(float(v) for v in angular),
        )
        with self._lock:
            self._odom = snap

    #--------------------------------------------------------------------------------
    def update_magnetometer(self, x: float, y: float, z: float):
        snap = Vector3Snapshot(float(x), float(y), float(z))
        with self._lock:
            self._magnetometer = snap

    #--------------------------------------------------------------------------------
    def update_gyroscope(self, x: float, y: float, z: float):
        snap = Vector3Snapshot(float(x), float(y), float(z))
        with self._lock:
            self._gyroscope = snap

    #--------------------------------------------------------------------------------
    def update_accelerometer(self, x: float, y: float, z: float):
        snap = Vector3Snapshot(float(x), float(y), float(z))
        with self._lock:
            self._accelerometer = snap

    #--------------------------------------------------------------------------------
    def ir(self) -> IRSnapshot:
        with self._lock:
            return self._ir

    #--------------------------------------------------------------------------------
    def odometry(self) -> OdomSnapshot:
        with self._lock:
            return self._odom

    #--------------------------------------------------------------------------------
    def encoders(self) -> EncoderSnapshot:
        with self._lock:
            return self._encoders

    #--------------------------------------------------------------------------------
    def magnetometer(self) -> Vector3Snapshot:
        with self._lock:
            return self._magnetometer

    #--------------------------------------------------------------------------------
    def gyroscope(self) -> Vector3Snapshot:
        with self._lock:
            return self._gyroscope

    #--------------------------------------------------------------------------------
    def accelerometer(self) -> Vector3Snapshot:
        with self._lock:
            return self._accelerometer

    #--------------------------------------------------------------------------------
    def snapshot(self) -> SensorSnapshot:
        """All channel groups as read at one instant."""
        with self._lock:
            return SensorSnapshot(
                ir=self._ir,
                odom=self._odom,
                encoders=self._encoders,
                magnetometer=self._magnetometer,
                gyroscope=self._gyroscope,
                accelerometer=self._accelerometer,
            )
