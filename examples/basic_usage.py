"""
基础使用示例
演示easyio的文件流、便捷函数和控制台交互
"""

import logging
import os
import tempfile

from easyio import (
    Console,
    EasyIOError,
    FileMode,
    FileStream,
    append_file,
    read_file,
    read_lines,
    write_file,
)

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    """主函数"""
    Console.println("=== easyio 基础使用示例 ===\n")

    work_dir = tempfile.mkdtemp(prefix="easyio_demo_")
    path = os.path.join(work_dir, "scores.txt")

    try:
        # 1. 写入文件
        Console.println("1. 写入文件...")
        write_file(path, "name score\n")
        append_file(path, b"alice 90\n")
        Console.println("   ✓ 写入成功: {}", path)

        # 2. 用文件流格式化写入
        Console.println("\n2. 格式化写入...")
        with FileStream(path, FileMode.APPEND) as f:
            f.write_line_fmt("{} {}", "bob", 85)
            f.write_line_fmt("{name} {score}", name="carol", score=77)
        Console.println("   ✓ 追加了 2 行")

        # 3. 读取整个文件
        Console.println("\n3. 读取整个文件...")
        content = read_file(path)
        Console.println("   ✓ 共 {} 字节", len(content))

        # 4. 按行读取
        Console.println("\n4. 按行读取...")
        for line in read_lines(path):
            Console.println("     - {}", line.decode("utf-8"))

        # 5. 类型化读取
        Console.println("\n5. 类型化读取...")
        with FileStream(path) as f:
            f.read_line()
            total = 0
            while f.read(str) is not None:
                score = f.read(int)
                if score is None:
                    break
                total += score
        Console.println("   ✓ 分数合计: {}", total)

        # 6. 控制台提示
        Console.println("\n6. 控制台提示...")
        name = Console.prompt("   请输入名字: ")
        score = Console.prompt("   请输入分数: ", int)
        append_file(path, f"{name} {score}\n")
        Console.println("   ✓ 已追加 {} {}", name, score)

        # 7. 打开不存在的文件
        Console.println("\n7. 打开不存在的文件...")
        try:
            FileStream(os.path.join(work_dir, "missing.txt"))
        except EasyIOError as e:
            Console.println("   ✓ 捕获错误: {}", e)

        Console.println("\n=== 示例执行完成 ===")

    except EasyIOError as e:
        Console.println("\n✗ 执行过程中发生错误: {}", e)

    finally:
        for entry in os.listdir(work_dir):
            os.remove(os.path.join(work_dir, entry))
        os.rmdir(work_dir)


if __name__ == "__main__":
    main()
