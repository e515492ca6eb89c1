from pydantic import BaseModel

class DashboardStatistics(BaseModel):
    totalUsers: int = 0
    totalRequests: int = 0

    totalLeaves: int = 0
    totalPendingLeaves: int = 0
    totalApprovedLeaves: int = 0
    totalRejectedLeaves: int = 0

    totalPermissions: int = 0
    totalPendingPermissions: int = 0
    totalApprovedPermissions: int = 0
    totalRejectedPermissions: int = 0

    totalSwaps: int = 0
    totalPendingSwaps: int = 0
    totalApprovedSwaps: int = 0
    totalRejectedSwaps: int = 0
