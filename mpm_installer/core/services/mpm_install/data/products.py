"""
L0 Data — Product records and the per-platform catalogs built from them.

Pure data.  One record per product: the release it first shipped with
MPM support, the release it was renamed or withdrawn at, and the
platforms that offer it.  R2017b is the first release MPM can install,
so everything already shipping by then is recorded as added in R2017b.

Renames are a removal of the old name plus an addition of the new one
at the same release, e.g. Neural_Network_Toolbox → Deep_Learning_Toolbox
in R2018b.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from mpm_installer.core.models.catalog import ProductCatalog, ProductRecord
from mpm_installer.core.models.platform import Platform

_WIN = Platform.WINDOWS
_LNX = Platform.LINUX
_MAC = Platform.MACOS_X64
_ARM = Platform.MACOS_ARM

_WINDOWS_ONLY = frozenset({_WIN})
_NOT_MACOS = frozenset({_WIN, _LNX})


PRODUCT_RECORDS: tuple[ProductRecord, ...] = (
    # ── Shipping with R2017b ────────────────────────────────────
    ProductRecord("Aerospace_Blockset"),
    ProductRecord("Aerospace_Toolbox"),
    ProductRecord("Antenna_Toolbox"),
    ProductRecord("Bioinformatics_Toolbox"),
    ProductRecord("Control_System_Toolbox"),
    ProductRecord("Curve_Fitting_Toolbox"),
    ProductRecord("DSP_System_Toolbox"),
    ProductRecord("Database_Toolbox"),
    ProductRecord("Datafeed_Toolbox"),
    ProductRecord("Econometrics_Toolbox"),
    ProductRecord("Embedded_Coder"),
    ProductRecord("Filter_Design_HDL_Coder"),
    ProductRecord("Financial_Instruments_Toolbox"),
    ProductRecord("Financial_Toolbox"),
    ProductRecord("Fixed-Point_Designer"),
    ProductRecord("Fuzzy_Logic_Toolbox"),
    ProductRecord("GPU_Coder", platforms=_NOT_MACOS),
    ProductRecord("Global_Optimization_Toolbox"),
    ProductRecord("HDL_Coder"),
    ProductRecord("HDL_Verifier"),
    ProductRecord("Image_Acquisition_Toolbox"),
    ProductRecord("Image_Processing_Toolbox"),
    ProductRecord("Instrument_Control_Toolbox"),
    ProductRecord("MATLAB"),
    ProductRecord("MATLAB_Coder"),
    ProductRecord("MATLAB_Compiler"),
    ProductRecord("MATLAB_Compiler_SDK"),
    ProductRecord("MATLAB_Production_Server"),
    ProductRecord("MATLAB_Report_Generator"),
    ProductRecord("Mapping_Toolbox"),
    ProductRecord("Model_Predictive_Control_Toolbox"),
    ProductRecord("Optimization_Toolbox"),
    ProductRecord("Parallel_Computing_Toolbox"),
    ProductRecord("Partial_Differential_Equation_Toolbox"),
    ProductRecord("Phased_Array_System_Toolbox"),
    ProductRecord("Polyspace_Bug_Finder", platforms=_NOT_MACOS),
    ProductRecord("Polyspace_Code_Prover", platforms=_NOT_MACOS),
    ProductRecord("Powertrain_Blockset"),
    ProductRecord("RF_Blockset"),
    ProductRecord("RF_Toolbox"),
    ProductRecord("Risk_Management_Toolbox"),
    ProductRecord("Robotics_System_Toolbox"),
    ProductRecord("Robust_Control_Toolbox"),
    ProductRecord("Signal_Processing_Toolbox"),
    ProductRecord("SimBiology"),
    ProductRecord("SimEvents"),
    ProductRecord("Simscape"),
    ProductRecord("Simscape_Driveline"),
    ProductRecord("Simscape_Fluids"),
    ProductRecord("Simscape_Multibody"),
    ProductRecord("Simulink"),
    ProductRecord("Simulink_3D_Animation"),
    ProductRecord("Simulink_Check"),
    ProductRecord("Simulink_Coder"),
    ProductRecord("Simulink_Control_Design"),
    ProductRecord("Simulink_Coverage"),
    ProductRecord("Simulink_Design_Optimization"),
    ProductRecord("Simulink_Design_Verifier"),
    ProductRecord("Simulink_Report_Generator"),
    ProductRecord("Simulink_Test"),
    ProductRecord("Stateflow"),
    ProductRecord("Statistics_and_Machine_Learning_Toolbox"),
    ProductRecord("Symbolic_Math_Toolbox"),
    ProductRecord("System_Identification_Toolbox"),
    ProductRecord("Text_Analytics_Toolbox"),
    ProductRecord("Vision_HDL_Toolbox"),
    ProductRecord("Wavelet_Toolbox"),
    ProductRecord("Data_Acquisition_Toolbox", platforms=_WINDOWS_ONLY),
    ProductRecord("Spreadsheet_Link", platforms=_WINDOWS_ONLY),

    # ── Renamed or withdrawn ────────────────────────────────────
    ProductRecord("Communications_System_Toolbox", removed="R2018b"),
    ProductRecord("LTE_System_Toolbox", removed="R2018b"),
    ProductRecord("Neural_Network_Toolbox", removed="R2018b"),
    ProductRecord("Simscape_Electronics", removed="R2018b"),
    ProductRecord("Simscape_Power_Systems", removed="R2018b"),
    ProductRecord("WLAN_System_Toolbox", removed="R2018b"),
    ProductRecord("Audio_System_Toolbox", removed="R2019a"),
    ProductRecord("Automated_Driving_System_Toolbox", removed="R2019a"),
    ProductRecord("Computer_Vision_System_Toolbox", removed="R2019a"),
    ProductRecord("MATLAB_Distributed_Computing_Server", removed="R2019a"),
    ProductRecord("LTE_HDL_Toolbox", removed="R2020a"),
    ProductRecord("Trading_Toolbox", removed="R2021a"),
    ProductRecord("Simulink_Requirements", removed="R2022a"),
    ProductRecord("OPC_Toolbox", removed="R2022a", platforms=_WINDOWS_ONLY),

    # ── Platform support arriving on Linux later than Windows ───
    ProductRecord("Vehicle_Network_Toolbox", "R2018a", platforms=_NOT_MACOS,
                  added_on={_WIN: "R2017b"}),
    ProductRecord("Simulink_PLC_Coder", "R2019b", platforms=_NOT_MACOS,
                  added_on={_WIN: "R2017b"}),
    ProductRecord("Simulink_Real-Time", "R2022a", platforms=_NOT_MACOS,
                  added_on={_WIN: "R2017b"}),
    ProductRecord("Simulink_Desktop_Real-Time", "R2023b",
                  added_on={_WIN: "R2017b", _MAC: "R2017b"}),

    # ── R2018a ──────────────────────────────────────────────────
    ProductRecord("Predictive_Maintenance_Toolbox", "R2018a"),
    ProductRecord("Vehicle_Dynamics_Blockset", "R2018a"),

    # ── R2018b ──────────────────────────────────────────────────
    ProductRecord("5G_Toolbox", "R2018b"),
    ProductRecord("Communications_Toolbox", "R2018b"),
    ProductRecord("Deep_Learning_Toolbox", "R2018b"),
    ProductRecord("LTE_Toolbox", "R2018b"),
    ProductRecord("Sensor_Fusion_and_Tracking_Toolbox", "R2018b"),
    ProductRecord("Simscape_Electrical", "R2018b"),
    ProductRecord("WLAN_Toolbox", "R2018b"),

    # ── R2019a ──────────────────────────────────────────────────
    ProductRecord("AUTOSAR_Blockset", "R2019a"),
    ProductRecord("Audio_Toolbox", "R2019a"),
    ProductRecord("Automated_Driving_Toolbox", "R2019a"),
    ProductRecord("Computer_Vision_Toolbox", "R2019a"),
    ProductRecord("MATLAB_Parallel_Server", "R2019a"),
    ProductRecord("Mixed-Signal_Blockset", "R2019a"),
    ProductRecord("Polyspace_Bug_Finder_Server", "R2019a", platforms=_NOT_MACOS),
    ProductRecord("Polyspace_Code_Prover_Server", "R2019a", platforms=_NOT_MACOS),
    ProductRecord("Reinforcement_Learning_Toolbox", "R2019a"),
    ProductRecord("SerDes_Toolbox", "R2019a"),
    ProductRecord("SoC_Blockset", "R2019a"),
    ProductRecord("System_Composer", "R2019a"),

    # ── R2019b ──────────────────────────────────────────────────
    ProductRecord("Navigation_Toolbox", "R2019b"),
    ProductRecord("ROS_Toolbox", "R2019b"),

    # ── R2020a ──────────────────────────────────────────────────
    ProductRecord("MATLAB_Web_App_Server", "R2020a"),
    ProductRecord("Motor_Control_Blockset", "R2020a"),
    ProductRecord("Simulink_Compiler", "R2020a"),
    ProductRecord("Wireless_HDL_Toolbox", "R2020a"),

    # ── R2020b ──────────────────────────────────────────────────
    ProductRecord("Deep_Learning_HDL_Toolbox", "R2020b"),
    ProductRecord("Lidar_Toolbox", "R2020b"),
    ProductRecord("Radar_Toolbox", "R2020b"),
    ProductRecord("UAV_Toolbox", "R2020b"),

    # ── R2021a ──────────────────────────────────────────────────
    ProductRecord("DDS_Blockset", "R2021a"),
    ProductRecord("Satellite_Communications_Toolbox", "R2021a"),

    # ── R2021b ──────────────────────────────────────────────────
    ProductRecord("RF_PCB_Toolbox", "R2021b"),
    ProductRecord("Signal_Integrity_Toolbox", "R2021b"),

    # ── R2022a ──────────────────────────────────────────────────
    ProductRecord("Bluetooth_Toolbox", "R2022a"),
    ProductRecord("DSP_HDL_Toolbox", "R2022a"),
    ProductRecord("Industrial_Communication_Toolbox", "R2022a"),
    ProductRecord("Requirements_Toolbox", "R2022a"),
    ProductRecord("Wireless_Testbench", "R2022a", platforms=_NOT_MACOS),

    # ── R2022b ──────────────────────────────────────────────────
    ProductRecord("Medical_Imaging_Toolbox", "R2022b"),
    ProductRecord("Simscape_Battery", "R2022b"),

    # ── R2023a ──────────────────────────────────────────────────
    ProductRecord("C2000_Microcontroller_Blockset", "R2023a"),
    ProductRecord("MATLAB_Test", "R2023a"),

    # ── R2023b ──────────────────────────────────────────────────
    ProductRecord("Polyspace_Test", "R2023b", platforms=_NOT_MACOS),
    ProductRecord("Simulink_Fault_Analyzer", "R2023b"),
)

# Products the native Apple silicon build does not ship, on top of
# everything already missing from macOS.
_APPLE_SILICON_EXCLUDED: frozenset[str] = frozenset({
    "Simulink_Desktop_Real-Time",
})


def _macos_records() -> tuple[ProductRecord, ...]:
    """Intel macOS records reused for Apple silicon."""
    return tuple(
        ProductRecord(
            product=r.product,
            added=r.added_on.get(_MAC, r.added),
            removed=r.removed,
            platforms=frozenset({_ARM}),
        )
        for r in PRODUCT_RECORDS
        if _MAC in r.platforms
    )


def _build_catalogs() -> Mapping[Platform, ProductCatalog]:
    catalogs = {
        _WIN: ProductCatalog.from_records(_WIN, PRODUCT_RECORDS),
        _LNX: ProductCatalog.from_records(_LNX, PRODUCT_RECORDS),
        _MAC: ProductCatalog.from_records(_MAC, PRODUCT_RECORDS),
        _ARM: ProductCatalog.from_records(
            _ARM, _macos_records(), excluded=_APPLE_SILICON_EXCLUDED,
        ),
    }
    return MappingProxyType(catalogs)


# Built once at import; read-only afterwards.
PRODUCT_CATALOGS: Mapping[Platform, ProductCatalog] = _build_catalogs()

# Shorthand tokens accepted at the product prompt.
PRODUCT_SHORTHANDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "parallel_products": (
        "MATLAB",
        "Parallel_Computing_Toolbox",
        "MATLAB_Parallel_Server",
    ),
})
