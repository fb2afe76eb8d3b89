"""
Chinese → English technical vocabulary.

Three read-only tables, consulted in order by TermNormalizer:

1. EXACT_TERMS: whole-token lookup (CRUD verbs, UI nouns, infra nouns)
2. MORPHEMES: sub-word pieces used to decompose 2-3 character compounds
3. PATTERN_RULES: priority-ordered (synonym regex → canonical word) rules
"""

import re
from types import MappingProxyType

EXACT_TERMS = MappingProxyType({
    # ═══════════════════════════════════════════
    # CRUD and data verbs
    # ═══════════════════════════════════════════
    "获取": "get",
    "取得": "get",
    "读取": "read",
    "创建": "create",
    "新建": "create",
    "添加": "add",
    "新增": "add",
    "删除": "delete",
    "移除": "remove",
    "更新": "update",
    "修改": "update",
    "编辑": "edit",
    "查询": "query",
    "查找": "find",
    "搜索": "search",
    "保存": "save",
    "存储": "store",
    "提交": "submit",
    "发送": "send",
    "取消": "cancel",
    "处理": "handle",
    "计算": "calculate",
    "统计": "count",
    "过滤": "filter",
    "筛选": "filter",
    "排序": "sort",
    "验证": "validate",
    "校验": "validate",
    "检查": "check",
    "确认": "confirm",
    "格式化": "format",
    "解析": "parse",
    "转换": "convert",
    "合并": "merge",
    "拆分": "split",
    "比较": "compare",
    "生成": "generate",
    "渲染": "render",
    "初始化": "init",
    "销毁": "destroy",
    "订阅": "subscribe",
    "监听": "watch",
    "触发": "trigger",
    "切换": "toggle",
    "显示": "show",
    "隐藏": "hide",
    "打开": "open",
    "关闭": "close",
    "选择": "select",
    "点击": "click",
    "跳转": "navigate",
    "登录": "login",
    "注册": "register",
    "注销": "logout",
    "退出": "logout",
    "加载": "load",
    "刷新": "refresh",
    "重置": "reset",
    "清空": "clear",
    "复制": "copy",
    "粘贴": "paste",
    "撤销": "undo",
    "重做": "redo",
    "打印": "print",
    "导出": "export",
    "导入": "import",
    "下载": "download",
    "上传": "upload",
    "启动": "start",
    "停止": "stop",
    "暂停": "pause",
    "继续": "resume",
    "运行": "run",
    "执行": "execute",
    "调试": "debug",
    "测试": "test",
    "部署": "deploy",
    "发布": "publish",
    "构建": "build",
    "编译": "compile",
    "同步": "sync",
    "重试": "retry",
    "加密": "encrypt",
    "解密": "decrypt",
    "认证": "authenticate",
    "授权": "authorize",
    "分享": "share",
    "关注": "follow",
    "支付": "pay",
    # ═══════════════════════════════════════════
    # UI nouns
    # ═══════════════════════════════════════════
    "页面": "page",
    "组件": "component",
    "按钮": "button",
    "表单": "form",
    "输入框": "input",
    "列表": "list",
    "表格": "table",
    "卡片": "card",
    "弹窗": "modal",
    "对话框": "dialog",
    "菜单": "menu",
    "导航": "navigation",
    "导航栏": "navbar",
    "侧边栏": "sidebar",
    "标签": "tab",
    "面板": "panel",
    "图标": "icon",
    "图片": "image",
    "头像": "avatar",
    "布局": "layout",
    "主题": "theme",
    "样式": "style",
    "颜色": "color",
    "字体": "font",
    "宽度": "width",
    "高度": "height",
    "大小": "size",
    "位置": "position",
    "视图": "view",
    "模板": "template",
    "图表": "chart",
    "分页": "pagination",
    "提示": "tip",
    "通知": "notification",
    "消息": "message",
    "链接": "link",
    # ═══════════════════════════════════════════
    # Domain and infra nouns
    # ═══════════════════════════════════════════
    "用户": "user",
    "项目": "project",
    "数据": "data",
    "信息": "info",
    "详情": "detail",
    "个人资料": "profile",
    "资料": "profile",
    "账户": "account",
    "账号": "account",
    "密码": "password",
    "令牌": "token",
    "密钥": "key",
    "权限": "permission",
    "角色": "role",
    "会话": "session",
    "订单": "order",
    "商品": "product",
    "价格": "price",
    "购物车": "cart",
    "评论": "comment",
    "任务": "task",
    "事件": "event",
    "活动": "activity",
    "文件": "file",
    "文档": "document",
    "视频": "video",
    "音频": "audio",
    "报告": "report",
    "日志": "log",
    "错误": "error",
    "异常": "exception",
    "结果": "result",
    "请求": "request",
    "响应": "response",
    "接口": "api",
    "服务": "service",
    "服务器": "server",
    "客户端": "client",
    "数据库": "database",
    "缓存": "cache",
    "队列": "queue",
    "路由": "route",
    "模型": "model",
    "状态": "state",
    "配置": "config",
    "设置": "settings",
    "选项": "option",
    "参数": "param",
    "属性": "property",
    "类型": "type",
    "枚举": "enum",
    "常量": "constant",
    "变量": "variable",
    "函数": "function",
    "方法": "method",
    "工具": "util",
    "钩子": "hook",
    "指令": "directive",
    "名称": "name",
    "名字": "name",
    "用户名": "username",
    "昵称": "nickname",
    "标题": "title",
    "内容": "content",
    "描述": "description",
    "分数": "score",
    "年龄": "age",
    "城市": "city",
    "超时": "timeout",
    "限制": "limit",
    "时间": "time",
    "日期": "date",
    "地址": "address",
    "邮箱": "email",
    "手机号": "phone",
    "数量": "count",
    "次数": "count",
    "总数": "total",
    "最大": "max",
    "最小": "min",
    "默认": "default",
    "当前": "current",
    "全部": "all",
    "是否": "is",
})

# Sub-word pieces for compound decomposition (first N-1 chars + last char).
# Values are tuples: a morpheme may carry more than one English sense.
MORPHEMES = MappingProxyType({
    # Single-character verbs
    "增": ("add",),
    "删": ("delete",),
    "改": ("update",),
    "查": ("query",),
    "取": ("get",),
    "存": ("save",),
    "读": ("read",),
    "写": ("write",),
    "发": ("send",),
    "收": ("receive",),
    "开": ("open",),
    "关": ("close",),
    "算": ("calculate",),
    "选": ("select",),
    "搜": ("search",),
    "登": ("login",),
    "设": ("set",),
    # Single-character nouns
    "表": ("table",),
    "页": ("page",),
    "图": ("image",),
    "键": ("key",),
    "值": ("value",),
    "名": ("name",),
    "码": ("code",),
    "号": ("number",),
    "数": ("count",),
    "量": ("amount",),
    "单": ("form",),
    "框": ("box",),
    "栏": ("bar",),
    "项": ("item",),
    "卡": ("card",),
    "库": ("store",),
    "器": ("handler",),
    "源": ("source",),
    "者": ("user",),
    # Two-character pieces that prefix a trailing single character
    "用户": ("user",),
    "数据": ("data",),
    "文件": ("file",),
    "商品": ("product",),
    "订单": ("order",),
    "搜索": ("search",),
    "登录": ("login",),
    "消息": ("message",),
    "设置": ("set", "config"),
    "工具": ("util", "tool"),
    "下拉": ("dropdown",),
    "输入": ("input",),
    "输出": ("output",),
    "导航": ("navigation",),
    "验证": ("verification",),
})

# Priority-ordered synonym rules; the first match wins.
PATTERN_RULES: tuple[tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern), word)
    for pattern, word in (
        # Verbs
        (r"创建|添加|新增|建立", "create"),
        (r"删除|移除|清除", "delete"),
        (r"更新|修改|更改|编辑", "update"),
        (r"获取|取得|拿|读取|读", "get"),
        (r"查询|搜索|查找|搜", "query"),
        (r"保存|存储|存", "save"),
        (r"提交|发送|传送", "submit"),
        (r"取消|撤销", "cancel"),
        (r"处理|操作", "process"),
        (r"计算|算", "calculate"),
        (r"过滤|筛选", "filter"),
        (r"排序|排列", "sort"),
        (r"验证|校验|检查", "validate"),
        (r"确认|确定", "confirm"),
        (r"登录|登入", "login"),
        (r"注册", "register"),
        (r"注销|登出|退出", "logout"),
        (r"设置|设定|配置", "set"),
        (r"加载|载入", "load"),
        (r"刷新|重载", "refresh"),
        (r"重置|重设", "reset"),
        (r"清空|清", "clear"),
        (r"复制|拷贝", "copy"),
        (r"运行|执行", "run"),
        (r"部署|发布", "deploy"),
        (r"构建|编译|打包", "build"),
        # Nouns
        (r"项目|工程", "project"),
        (r"用户|人员|客户|会员", "user"),
        (r"数据|资料", "data"),
        (r"列表|清单", "list"),
        (r"详情|详细", "detail"),
        (r"表单|单子", "form"),
        (r"页面|页", "page"),
        (r"组件|部件|元件", "component"),
        (r"服务", "service"),
        (r"工具", "util"),
        (r"状态|状况", "state"),
        (r"配置项", "config"),
        (r"参数|参量", "param"),
        (r"结果|成果", "result"),
        (r"响应|回应", "response"),
        (r"请求|要求", "request"),
        (r"错误", "error"),
        (r"异常|例外", "exception"),
        (r"日志|记录", "log"),
        (r"文件|档案", "file"),
        (r"图片|图像|照片", "image"),
        (r"视频|录像", "video"),
        (r"报告|报表", "report"),
        (r"图表|图形", "chart"),
        (r"表格|表", "table"),
        (r"卡片|卡", "card"),
        (r"面板|板", "panel"),
        (r"菜单", "menu"),
        (r"按钮|按键", "button"),
        (r"链接|连接", "link"),
        (r"输入", "input"),
        (r"输出", "output"),
    )
)

# Function characters dropped during segmentation
STOP_CHARS = frozenset("的是在和或了我这那个把被与及一")

# Longest exact key the segmenter needs to try
MAX_TERM_LENGTH = max(len(k) for k in EXACT_TERMS)
